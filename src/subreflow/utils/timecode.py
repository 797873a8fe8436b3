"""
Timecode codec for subreflow.

Converts between `HH:MM:SS,mmm` text and integer millisecond offsets, and
partitions a cue interval into ordered, contiguous sub-intervals.

Responsibilities:
- Strict parsing (malformed input raises TimecodeError, it is never guessed).
- Zero-padded formatting that round-trips every non-negative offset.
- Interval partitioning whose pieces cover the original interval exactly.

Does NOT:
- Clamp, snap or shift timings (cue timing is only ever subdivided).
"""

from __future__ import annotations

import re

from subreflow.domain.cue import TimeRange
from subreflow.exceptions import TimecodeError

TIMECODE_RE = re.compile(r"^(\d{2,}):([0-5]\d):([0-5]\d),(\d{3})$")
TIMING_SEPARATOR = "-->"

MS_PER_SECOND = 1000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_HOUR = 60 * MS_PER_MINUTE


def parse_timecode(text: str) -> int:
    # "HH:MM:SS,mmm" -> milliseconds
    match = TIMECODE_RE.match(text.strip())
    if match is None:
        raise TimecodeError(f"Malformed timecode '{text}'; expected HH:MM:SS,mmm.")
    hh, mm, ss, ms = (int(part) for part in match.groups())
    return hh * MS_PER_HOUR + mm * MS_PER_MINUTE + ss * MS_PER_SECOND + ms


def format_timecode(ms: int) -> str:
    # milliseconds -> "HH:MM:SS,mmm"
    if ms < 0:
        raise TimecodeError(f"Cannot format negative offset {ms}ms.")
    hh, rest = divmod(ms, MS_PER_HOUR)
    mm, rest = divmod(rest, MS_PER_MINUTE)
    ss, millis = divmod(rest, MS_PER_SECOND)
    return f"{hh:02d}:{mm:02d}:{ss:02d},{millis:03d}"


def parse_time_range(line: str) -> TimeRange:
    parts = line.split(TIMING_SEPARATOR)
    if len(parts) != 2:
        raise TimecodeError(f"Malformed timing line '{line}'; expected 'start --> end'.")
    return TimeRange(start=parse_timecode(parts[0]), end=parse_timecode(parts[1]))


def format_time_range(time_range: TimeRange) -> str:
    return f"{format_timecode(time_range.start)} {TIMING_SEPARATOR} {format_timecode(time_range.end)}"


def partition(start: int, end: int, parts: int) -> list[TimeRange]:
    """
    Split [start, end] into `parts` ordered, contiguous ranges.

    The step is floor((end - start) / parts) with a 1ms floor, and the last
    range always ends exactly at `end`. When the interval is shorter than
    `parts` milliseconds the boundaries are clamped to `end`, so trailing
    ranges may be empty but never run backwards. An interval that ends before
    it starts is rejected.
    """
    if parts < 1:
        raise ValueError("parts must be >= 1")
    if end < start:
        raise ValueError(f"cannot partition inverted interval {start}..{end}")
    step = max(1, (end - start) // parts)
    ranges: list[TimeRange] = []
    for i in range(parts):
        a = min(start + i * step, end)
        b = end if i == parts - 1 else min(a + step, end)
        ranges.append(TimeRange(start=a, end=b))
    return ranges
