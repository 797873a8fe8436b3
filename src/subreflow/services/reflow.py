"""
Cue reflow orchestrator for subreflow.

Turns one non-compliant cue into one or more compliant cues: the text is
normalized, broken into clauses, wrapped line by line, grouped into cues of
at most `max_lines` lines, and the original interval is partitioned across
the resulting cues.

Responsibilities:
- Decide whether a cue needs reflow at all (compliant cues pass through).
- Produce lines that fit the visible-character limit.
- Re-index the whole document densely after every fix.

Does NOT:
- Move cue boundaries outside the original interval.
- Mutate input cues (new Cue values are always returned).
"""

from __future__ import annotations

from dataclasses import replace
from typing import Sequence

from subreflow.domain.cue import Cue
from subreflow.domain.layout import DEFAULT_LIMITS, LayoutLimits
from subreflow.exceptions import CueNotFoundError
from subreflow.rules.base import RuleSet
from subreflow.rules.english import ENGLISH_RULES
from subreflow.rules.predicates import is_bad_line_pair
from subreflow.services.chunker import split_semantic_chunks
from subreflow.services.splitter import best_two_line_split, slice_line, split_chunk
from subreflow.services.tokenizer import visible_len
from subreflow.utils.logging import get_logger
from subreflow.utils.text import normalize_text
from subreflow.utils.timecode import partition

log = get_logger(__name__)


def needs_reflow(
    cue: Cue,
    *,
    rules: RuleSet = ENGLISH_RULES,
    limits: LayoutLimits = DEFAULT_LIMITS,
) -> bool:
    if len(cue.lines) > limits.max_lines:
        return True
    if any(visible_len(line) > limits.max_chars for line in cue.lines):
        return True
    return len(cue.lines) == 2 and is_bad_line_pair(cue.lines, rules=rules)


def wrap_text(
    text: str,
    *,
    rules: RuleSet = ENGLISH_RULES,
    limits: LayoutLimits = DEFAULT_LIMITS,
) -> list[str]:
    """Wrap cue text into lines of at most `limits.max_chars` visible characters."""
    normalized = normalize_text(text)
    if not normalized:
        return []
    if visible_len(normalized) <= limits.max_chars:
        return [normalized]

    chunks = split_semantic_chunks(normalized, rules=rules)
    lines: list[str] = []
    for chunk in chunks:
        if visible_len(chunk) <= limits.max_chars:
            lines.append(chunk)
        else:
            lines.extend(split_chunk(chunk, rules=rules, limits=limits))

    # Keep a single clause in one cue when it can be laid out in two lines.
    if len(chunks) == 1 and len(lines) > limits.max_lines >= 2:
        compact = best_two_line_split(normalized, rules=rules, limits=limits)
        if compact is not None:
            lines = compact

    if limits.hard_wrap:
        lines = [piece for line in lines for piece in slice_line(line, limits=limits)]
    return lines


def group_lines(lines: Sequence[str], max_lines: int) -> list[tuple[str, ...]]:
    if not lines:
        return [()]
    return [tuple(lines[i : i + max_lines]) for i in range(0, len(lines), max_lines)]


def reflow_cue(
    cue: Cue,
    *,
    rules: RuleSet = ENGLISH_RULES,
    limits: LayoutLimits = DEFAULT_LIMITS,
) -> list[Cue]:
    lines = wrap_text(cue.text, rules=rules, limits=limits)
    groups = group_lines(lines, limits.max_lines)
    if len(groups) == 1:
        return [replace(cue, lines=groups[0])]

    if cue.time is None:
        log.warning("Cue %s has unparseable timing; split cues reuse '%s'", cue.index, cue.raw_time)
        times = [None] * len(groups)
    elif cue.time.duration_ms < 0:
        log.warning("Cue %s ends before it starts; split cues reuse its timing", cue.index)
        times = [cue.time] * len(groups)
    else:
        times = partition(cue.time.start, cue.time.end, len(groups))
    return [
        Cue(index=cue.index, time=time_range, lines=group, raw_time=cue.raw_time)
        for time_range, group in zip(times, groups)
    ]


def renumber(cues: Sequence[Cue]) -> list[Cue]:
    return [cue if cue.index == i else replace(cue, index=i) for i, cue in enumerate(cues, start=1)]


def fix(
    cues: Sequence[Cue],
    *,
    rules: RuleSet = ENGLISH_RULES,
    limits: LayoutLimits = DEFAULT_LIMITS,
) -> list[Cue]:
    out: list[Cue] = []
    reflowed = 0
    for cue in cues:
        if not needs_reflow(cue, rules=rules, limits=limits):
            out.append(cue)
            continue
        pieces = reflow_cue(cue, rules=rules, limits=limits)
        log.debug("Cue %s reflowed into %d cue(s)", cue.index, len(pieces))
        out.extend(pieces)
        reflowed += 1
    log.info("Reflowed %d of %d cue(s); document now has %d cue(s)", reflowed, len(cues), len(out))
    return renumber(out)


def fix_one(
    cues: Sequence[Cue],
    position: int,
    *,
    rules: RuleSet = ENGLISH_RULES,
    limits: LayoutLimits = DEFAULT_LIMITS,
) -> list[Cue]:
    """Reflow only the cue at 1-based `position`, then renumber the whole document."""
    if not 1 <= position <= len(cues):
        raise CueNotFoundError(f"No cue at position {position}; document has {len(cues)} cue(s).")
    target = cues[position - 1]
    pieces = reflow_cue(target, rules=rules, limits=limits)
    log.debug("Cue at position %d reflowed into %d cue(s)", position, len(pieces))
    return renumber([*cues[: position - 1], *pieces, *cues[position:]])
