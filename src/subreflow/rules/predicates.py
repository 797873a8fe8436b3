"""
Split predicates and quality scoring over a RuleSet.

Every function takes the rule tables explicitly (defaulting to English) so a
caller can swap languages without touching the scoring algorithm.

Word arguments are the visible boundary words of a candidate split: the last
word of the left side and the first word of the right side.
"""

from __future__ import annotations

from subreflow.domain.layout import DEFAULT_LIMITS, LayoutLimits
from subreflow.rules.base import RuleSet
from subreflow.rules.english import ENGLISH_RULES
from subreflow.services.tokenizer import visible_len, visible_text
from subreflow.utils.text import (
    bare_word,
    ends_clause,
    ends_sentence,
    ends_strong_punct,
    fold_apostrophes,
)


def _key(word: str) -> str:
    return fold_apostrophes(bare_word(word)).lower()


def _is_capitalized(word: str) -> bool:
    core = bare_word(word)
    return bool(core) and core[0].isupper()


def _starts_lowercase(word: str) -> bool:
    core = bare_word(word)
    return bool(core) and core[0].islower()


def _has_comparative_suffix(word: str, suffixes: tuple[str, ...]) -> bool:
    return any(word.endswith(s) for s in suffixes)


def is_forbidden_split(left: str, right: str, *, rules: RuleSet = ENGLISH_RULES) -> bool:
    """True when a line break between `left` and `right` would tear a phrase apart."""
    if not left or not right:
        return False

    lw = _key(left)
    rw = _key(right)
    if not lw or not rw:
        return False

    if lw in rules.glue_words:
        return True
    if lw.endswith(rules.negation_suffixes):
        return True
    if lw in rules.prepositions:
        return True
    if (lw, rw) in rules.phrasal_verbs or (lw, rw) in rules.expression_pairs:
        return True
    if _is_capitalized(left) and _is_capitalized(right):
        return True
    if lw.isdigit() and _starts_lowercase(right):
        return True
    if _has_comparative_suffix(lw, rules.comparative_suffixes) and _starts_lowercase(right):
        return True
    return False


def is_preferred_split(left: str, right: str, *, rules: RuleSet = ENGLISH_RULES) -> bool:
    """True when `left` closes a sentence/clause or `right` opens with a conjunction."""
    return ends_strong_punct(left.strip()) or _key(right) in rules.conjunctions


def split_quality(left: str, right: str, *, rules: RuleSet = ENGLISH_RULES) -> int:
    left = left.strip()
    score = 0
    if ends_sentence(left):
        score += 10
    elif ends_clause(left):
        score += 5
    if _key(right) in rules.conjunctions:
        score += 5
    if is_forbidden_split(left, right, rules=rules):
        score -= 20
    left_len = visible_len(left)
    right_len = visible_len(right.strip())
    if left_len < 10:
        score -= 5
    diff = abs(left_len - right_len)
    if diff < 5:
        score += 3
    elif diff < 10:
        score += 1
    return score


def is_bad_split(
    left: str,
    right: str,
    *,
    rules: RuleSet = ENGLISH_RULES,
    limits: LayoutLimits = DEFAULT_LIMITS,
) -> bool:
    """True when a two-sided layout leaves an empty, stubby or dangling line."""
    left_clean = visible_text(left).strip()
    right_clean = visible_text(right).strip()
    if not left_clean or not right_clean:
        return True
    if len(right_clean) < limits.min_tail_chars:
        return True
    if len(right_clean.split()) < limits.min_tail_words:
        return True
    last_word = left_clean.split()[-1].lower()
    return last_word in rules.bad_endings


def is_bad_line_pair(lines: list[str] | tuple[str, ...], *, rules: RuleSet = ENGLISH_RULES) -> bool:
    """Judge whether an existing two-line cue breaks at an awkward point."""
    if len(lines) != 2:
        return False
    left_words = visible_text(lines[0]).split()
    right_words = visible_text(lines[1]).split()
    if not left_words or not right_words:
        return True
    last_left = left_words[-1]
    first_right = right_words[0]
    if last_left.lower() in rules.dangling_conjunctions:
        return True
    if first_right.lower() in rules.dangling_conjunctions:
        return True
    if is_forbidden_split(last_left, first_right, rules=rules):
        return True
    return len(left_words) < 2 or len(right_words) < 2
