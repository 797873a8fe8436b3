"""
Tag-aware tokenizer for cue text.

Scans text left to right with an explicit two-state machine (outside a tag /
inside a tag). `<...>` and `{...}` runs become opaque tag tokens; maximal
non-whitespace runs outside tags become word tokens.

An opener with no matching closer is not a tag: the scanner rewinds and
reads it as an ordinary character, so unterminated markup stays visible and
counts toward the line length.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterator, Sequence

from subreflow.domain.tokens import Token

TAG_DELIMITERS = {"<": ">", "{": "}"}


class _State(Enum):
    OUTSIDE = "outside"
    INSIDE = "inside"


def _scan(text: str) -> Iterator[tuple[int, int, bool]]:
    """Yield (start, end, is_tag) spans for every token in `text`."""
    state = _State.OUTSIDE
    word_start: int | None = None
    tag_start = 0
    closer = ""
    literal_at = -1
    i = 0
    n = len(text)
    while True:
        if i >= n:
            if state is _State.INSIDE:
                # Unterminated tag: rewind and read the opener as plain text.
                state = _State.OUTSIDE
                literal_at = tag_start
                i = tag_start
                continue
            break

        ch = text[i]
        if state is _State.INSIDE:
            if ch == closer:
                yield tag_start, i + 1, True
                state = _State.OUTSIDE
            i += 1
            continue

        if ch in TAG_DELIMITERS and i != literal_at:
            if word_start is not None:
                yield word_start, i, False
                word_start = None
            state = _State.INSIDE
            tag_start = i
            closer = TAG_DELIMITERS[ch]
        elif ch.isspace():
            if word_start is not None:
                yield word_start, i, False
                word_start = None
        elif word_start is None:
            word_start = i
        i += 1

    if word_start is not None:
        yield word_start, n, False


def tokenize(text: str) -> list[Token]:
    tokens: list[Token] = []
    prev_end: int | None = None
    for start, end, is_tag in _scan(text):
        glued = prev_end is not None and prev_end == start
        tokens.append(Token(text=text[start:end], is_tag=is_tag, glued=glued))
        prev_end = end
    return tokens


def join_tokens(tokens: Sequence[Token]) -> str:
    parts: list[str] = []
    for i, tok in enumerate(tokens):
        if i > 0 and not tok.glued:
            parts.append(" ")
        parts.append(tok.text)
    return "".join(parts)


def visible_text(text: str) -> str:
    """Return `text` with every tag span removed; everything else is kept as-is."""
    pieces: list[str] = []
    cursor = 0
    for start, end, is_tag in _scan(text):
        if is_tag:
            pieces.append(text[cursor:start])
            cursor = end
    pieces.append(text[cursor:])
    return "".join(pieces)


def visible_len(text: str) -> int:
    return len(visible_text(text))


def visible_words(text: str) -> list[str]:
    return visible_text(text).split()
