from __future__ import annotations

from dataclasses import dataclass

MAX_CHARS_PER_LINE = 42
MAX_LINES_PER_CUE = 2
MIN_TAIL_CHARS = 10
MIN_TAIL_WORDS = 2
MIN_SPLIT_SCORE = -50


@dataclass(frozen=True)
class LayoutLimits:
    """Numeric limits every reflowed cue must respect."""

    max_chars: int = MAX_CHARS_PER_LINE
    max_lines: int = MAX_LINES_PER_CUE
    min_tail_chars: int = MIN_TAIL_CHARS
    min_tail_words: int = MIN_TAIL_WORDS
    min_split_score: int = MIN_SPLIT_SCORE
    hard_wrap: bool = True


DEFAULT_LIMITS = LayoutLimits()
