from __future__ import annotations

from dataclasses import dataclass, field

TOO_MANY_LINES = "too_many_lines"
LINE_TOO_LONG = "line_too_long"
BAD_LINE_PAIR = "bad_line_pair"


@dataclass(frozen=True)
class CueReport:
    index: int
    line_count: int
    max_visible_len: int
    violations: tuple[str, ...] = field(default_factory=tuple)
    natural_break: bool | None = None

    @property
    def is_valid(self) -> bool:
        return not self.violations


@dataclass(frozen=True)
class ReflowStats:
    total: int
    valid: int
    invalid: int

    def to_dict(self) -> dict:
        return {"total": self.total, "valid": self.valid, "invalid": self.invalid}
