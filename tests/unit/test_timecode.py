from __future__ import annotations

import pytest

from subreflow.domain.cue import TimeRange
from subreflow.exceptions import TimecodeError
from subreflow.utils.timecode import (
    format_time_range,
    format_timecode,
    parse_time_range,
    parse_timecode,
    partition,
)


def test_parse_and_format_timecode() -> None:
    assert parse_timecode("00:00:01,000") == 1000
    assert parse_timecode("01:02:03,004") == 3723004
    assert format_timecode(3723004) == "01:02:03,004"
    assert format_timecode(0) == "00:00:00,000"


def test_hours_beyond_two_digits_round_trip() -> None:
    ms = parse_timecode("100:00:00,000")
    assert format_timecode(ms) == "100:00:00,000"


@pytest.mark.parametrize("bad", ["1:00:00,000", "00:60:00,000", "00:00:00.000", "00:00:00,00", "", "soon"])
def test_malformed_timecode_raises(bad: str) -> None:
    with pytest.raises(TimecodeError):
        parse_timecode(bad)


def test_timecode_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        parse_timecode("nope")


def test_negative_offset_cannot_be_formatted() -> None:
    with pytest.raises(TimecodeError):
        format_timecode(-1)


def test_time_range_line() -> None:
    tr = parse_time_range("00:00:01,000 --> 00:00:07,000")
    assert tr == TimeRange(start=1000, end=7000)
    assert tr.duration_ms == 6000
    assert format_time_range(tr) == "00:00:01,000 --> 00:00:07,000"

    with pytest.raises(TimecodeError):
        parse_time_range("00:00:01,000 00:00:07,000")


def test_partition_halves_interval() -> None:
    assert partition(1000, 7000, 2) == [TimeRange(1000, 4000), TimeRange(4000, 7000)]


@pytest.mark.parametrize("start,end,parts", [(0, 1000, 3), (1000, 7001, 4), (0, 5, 3), (0, 1, 3), (500, 500, 2)])
def test_partition_is_contiguous_and_exact(start: int, end: int, parts: int) -> None:
    ranges = partition(start, end, parts)

    assert len(ranges) == parts
    assert ranges[0].start == start
    assert ranges[-1].end == end
    for prev, nxt in zip(ranges, ranges[1:]):
        assert prev.end == nxt.start
    assert all(r.start <= r.end for r in ranges)


def test_partition_remainder_goes_to_last_range() -> None:
    ranges = partition(0, 1000, 3)
    assert [r.duration_ms for r in ranges] == [333, 333, 334]


def test_partition_rejects_zero_parts() -> None:
    with pytest.raises(ValueError):
        partition(0, 1000, 0)


def test_partition_rejects_inverted_interval() -> None:
    with pytest.raises(ValueError):
        partition(5000, 1000, 2)
