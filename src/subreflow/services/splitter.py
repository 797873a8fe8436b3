"""
Line splitter: wraps one over-long token run into lines that fit the limit.

Every whitespace boundary between two words is a split candidate. Candidates
are filtered, scored and the best one wins (earliest boundary on ties). When
nothing scores acceptably a greedy left-to-right fill takes over. The process
repeats on the remaining tail until it fits.

Boundaries only ever fall on whitespace, so markup glued to a word
(`<i>word</i>`) is never separated from it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from subreflow.domain.layout import DEFAULT_LIMITS, LayoutLimits
from subreflow.domain.tokens import Token
from subreflow.rules.base import RuleSet
from subreflow.rules.english import ENGLISH_RULES
from subreflow.rules.predicates import is_bad_split, is_forbidden_split, split_quality
from subreflow.services.tokenizer import join_tokens, tokenize, visible_len, visible_text, visible_words
from subreflow.utils.logging import get_logger
from subreflow.utils.text import bare_word, ends_strong_punct

log = get_logger(__name__)

STRONG_PUNCT_BONUS = 30
CONJUNCTION_BONUS = 20
PREPOSITION_BONUS = 15
FORBIDDEN_PENALTY = -200


@dataclass(frozen=True)
class SplitCandidate:
    index: int
    left: str
    right: str
    score: int


def word_boundaries(tokens: Sequence[Token]) -> list[int]:
    """
    Token indices where a line may start, one per gap between two words.

    When a gap holds standalone tags (`word </i> <b> word`), closing tags stay
    on the left line and anything else moves to the right line.
    """
    boundaries: list[int] = []
    prev_word: int | None = None
    for i, tok in enumerate(tokens):
        if tok.is_tag:
            continue
        if prev_word is not None:
            gap = [j for j in range(prev_word + 1, i + 1) if not tokens[j].glued]
            if gap:
                boundaries.append(_pick_in_gap(tokens, gap))
        prev_word = i
    return boundaries


def _pick_in_gap(tokens: Sequence[Token], gap: list[int]) -> int:
    for idx in gap:
        if not tokens[idx].is_closing_tag:
            return idx
    return gap[-1]


def score_split(left: str, right: str, *, rules: RuleSet = ENGLISH_RULES) -> int:
    left_words = visible_words(left)
    right_words = visible_words(right)
    last_left = left_words[-1] if left_words else ""
    first_right = right_words[0] if right_words else ""
    first_key = bare_word(first_right).lower()

    score = 0
    if ends_strong_punct(last_left):
        score += STRONG_PUNCT_BONUS
    score += split_quality(last_left, first_right, rules=rules)
    if first_key in rules.conjunctions:
        score += CONJUNCTION_BONUS
    if first_key in rules.prepositions:
        score += PREPOSITION_BONUS
    if is_forbidden_split(last_left, first_right, rules=rules):
        score += FORBIDDEN_PENALTY

    diff = abs(visible_len(left) - visible_len(right))
    if diff < 6:
        score += 5
    elif diff < 12:
        score += 2
    return score


def split_candidates(
    tokens: Sequence[Token],
    *,
    rules: RuleSet = ENGLISH_RULES,
    limits: LayoutLimits = DEFAULT_LIMITS,
    right_fits: bool = False,
) -> list[SplitCandidate]:
    candidates: list[SplitCandidate] = []
    for idx in word_boundaries(tokens):
        left = join_tokens(tokens[:idx])
        right = join_tokens(tokens[idx:])
        if visible_len(left) > limits.max_chars:
            # Left only grows from here on.
            break
        if right_fits and visible_len(right) > limits.max_chars:
            continue
        if is_bad_split(left, right, rules=rules, limits=limits):
            continue
        candidates.append(
            SplitCandidate(index=idx, left=left, right=right, score=score_split(left, right, rules=rules))
        )
    return candidates


def best_candidate(candidates: Sequence[SplitCandidate]) -> SplitCandidate | None:
    best: SplitCandidate | None = None
    for cand in candidates:
        # Strict comparison keeps the earliest boundary on ties.
        if best is None or cand.score > best.score:
            best = cand
    return best


def find_best_split(
    tokens: Sequence[Token],
    *,
    rules: RuleSet = ENGLISH_RULES,
    limits: LayoutLimits = DEFAULT_LIMITS,
) -> int | None:
    best = best_candidate(split_candidates(tokens, rules=rules, limits=limits))
    if best is None or best.score < limits.min_split_score:
        return None
    return best.index


def greedy_split(tokens: Sequence[Token], *, limits: LayoutLimits = DEFAULT_LIMITS) -> int | None:
    """
    Fill the line left to right and break before the first word that overflows.

    If the very first word already overflows it gets a line of its own.
    """
    boundaries = word_boundaries(tokens)
    if not boundaries:
        return None
    last_fit: int | None = None
    for idx in boundaries:
        if visible_len(join_tokens(tokens[:idx])) > limits.max_chars:
            break
        last_fit = idx
    return last_fit if last_fit is not None else boundaries[0]


def split_tokens(
    tokens: Sequence[Token],
    *,
    rules: RuleSet = ENGLISH_RULES,
    limits: LayoutLimits = DEFAULT_LIMITS,
) -> list[str]:
    lines: list[str] = []
    remaining = list(tokens)
    while remaining:
        text = join_tokens(remaining)
        if visible_len(text) <= limits.max_chars:
            lines.append(text)
            break
        idx = find_best_split(remaining, rules=rules, limits=limits)
        if idx is None:
            idx = greedy_split(remaining, limits=limits)
            log.debug("No acceptable scored split; greedy fill at token %s", idx)
        if idx is None:
            # A single unbreakable unit; emitted verbatim.
            lines.append(text)
            break
        lines.append(join_tokens(remaining[:idx]))
        remaining = remaining[idx:]
    return lines


def split_chunk(
    text: str,
    *,
    rules: RuleSet = ENGLISH_RULES,
    limits: LayoutLimits = DEFAULT_LIMITS,
) -> list[str]:
    return split_tokens(tokenize(text), rules=rules, limits=limits)


def best_two_line_split(
    text: str,
    *,
    rules: RuleSet = ENGLISH_RULES,
    limits: LayoutLimits = DEFAULT_LIMITS,
) -> list[str] | None:
    """Best-scoring layout of `text` in exactly two fitting lines, if one exists."""
    tokens = tokenize(text)
    best = best_candidate(split_candidates(tokens, rules=rules, limits=limits, right_fits=True))
    if best is None:
        return None
    return [best.left, best.right]


def slice_line(line: str, *, limits: LayoutLimits = DEFAULT_LIMITS) -> list[str]:
    """
    Last-resort character slice for a line no word boundary can shorten.

    Cuts fall between visible characters only: a tag is copied whole into
    whichever piece it starts in, and only the spaces at cuts are dropped.
    """
    if visible_len(line) <= limits.max_chars:
        return [line]
    pieces: list[str] = []
    current: list[str] = []
    count = 0
    for i, tok in enumerate(tokenize(line)):
        if i > 0 and not tok.glued:
            if count >= limits.max_chars and tok.is_closing_tag:
                # A closing tag never starts a piece of its own.
                current.append(tok.text)
                continue
            if count >= limits.max_chars:
                pieces.append("".join(current))
                current, count = [], 0
            elif current:
                current.append(" ")
                count += 1
        if tok.is_tag:
            if count >= limits.max_chars and not tok.is_closing_tag:
                pieces.append("".join(current))
                current, count = [], 0
            current.append(tok.text)
            continue
        for ch in tok.text:
            if count >= limits.max_chars:
                pieces.append("".join(current).rstrip())
                current, count = [], 0
            current.append(ch)
            count += 1
    if current:
        pieces.append("".join(current))

    out: list[str] = []
    for piece in pieces:
        if out and not visible_text(piece).strip():
            # Markup left over at the end belongs to the last real piece.
            out[-1] += piece
        elif piece:
            out.append(piece)
    return out
