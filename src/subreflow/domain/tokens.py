from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Token:
    """
    Atomic unit of cue text: a word or an opaque formatting tag.

    `glued` is True when no whitespace separated this token from the previous
    one in the source (e.g. the `Hello` in `<i>Hello`); joining honours it so
    markup stays attached to the word it wraps.
    """

    text: str
    is_tag: bool = False
    glued: bool = False

    @property
    def is_closing_tag(self) -> bool:
        return self.is_tag and self.text[1:2] == "/"
