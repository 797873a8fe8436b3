from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class TimeRange:
    start: int
    end: int

    @property
    def duration_ms(self) -> int:
        return self.end - self.start


@dataclass(frozen=True)
class Cue:
    """
    One timed subtitle entry.

    `time` is None only when the source timing line could not be parsed;
    `raw_time` then carries that line so it can be written back verbatim.
    """

    index: int
    time: Optional[TimeRange]
    lines: tuple[str, ...] = field(default_factory=tuple)
    raw_time: str = field(default="", compare=False)

    def __post_init__(self) -> None:
        # Accept any sequence for convenience but store an immutable tuple.
        if not isinstance(self.lines, tuple):
            object.__setattr__(self, "lines", tuple(self.lines))

    @property
    def text(self) -> str:
        return " ".join(self.lines)
