from __future__ import annotations

from typing import Sequence

from subreflow.domain.cue import Cue
from subreflow.domain.layout import DEFAULT_LIMITS, LayoutLimits
from subreflow.domain.report import (
    BAD_LINE_PAIR,
    LINE_TOO_LONG,
    TOO_MANY_LINES,
    CueReport,
    ReflowStats,
)
from subreflow.rules.base import RuleSet
from subreflow.rules.english import ENGLISH_RULES
from subreflow.rules.predicates import is_bad_line_pair, is_preferred_split
from subreflow.services.tokenizer import visible_len, visible_words


def analyze_cue(
    cue: Cue,
    *,
    rules: RuleSet = ENGLISH_RULES,
    limits: LayoutLimits = DEFAULT_LIMITS,
) -> CueReport:
    lengths = [visible_len(line) for line in cue.lines]
    violations: list[str] = []
    if len(cue.lines) > limits.max_lines:
        violations.append(TOO_MANY_LINES)
    if any(length > limits.max_chars for length in lengths):
        violations.append(LINE_TOO_LONG)

    natural_break: bool | None = None
    if len(cue.lines) == 2:
        if is_bad_line_pair(cue.lines, rules=rules):
            violations.append(BAD_LINE_PAIR)
        left_words = visible_words(cue.lines[0])
        right_words = visible_words(cue.lines[1])
        if left_words and right_words:
            natural_break = is_preferred_split(left_words[-1], right_words[0], rules=rules)
        else:
            natural_break = False

    return CueReport(
        index=cue.index,
        line_count=len(cue.lines),
        max_visible_len=max(lengths, default=0),
        violations=tuple(violations),
        natural_break=natural_break,
    )


def analyze(
    cues: Sequence[Cue],
    *,
    rules: RuleSet = ENGLISH_RULES,
    limits: LayoutLimits = DEFAULT_LIMITS,
) -> list[CueReport]:
    """Report layout violations per cue without changing anything."""
    return [analyze_cue(cue, rules=rules, limits=limits) for cue in cues]


def summarize(reports: Sequence[CueReport]) -> ReflowStats:
    valid = sum(1 for report in reports if report.is_valid)
    return ReflowStats(total=len(reports), valid=valid, invalid=len(reports) - valid)
