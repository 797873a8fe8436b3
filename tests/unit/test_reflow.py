from __future__ import annotations

import pytest

from subreflow.domain.cue import Cue, TimeRange
from subreflow.domain.layout import LayoutLimits
from subreflow.exceptions import CueNotFoundError
from subreflow.rules.english import ENGLISH_RULES
from subreflow.services.reflow import fix, fix_one, group_lines, needs_reflow, renumber, wrap_text
from subreflow.services.tokenizer import visible_len, visible_words

LONG_TEXTS = [
    "I can't believe you did this to me after everything we have been through together",
    "Where are you going tonight? I'm heading downtown. Call me when you get there.",
    "We waited for hours at the station, then we finally went home together and slept until noon the next day.",
    "<i>You never told me what happened to the house on the corner of Maple Street</i>",
    "Visit https://example.com/a/very/long/path/that/never/ends/anywhere today please",
    "one two three four five six seven eight nine ten eleven twelve thirteen fourteen fifteen sixteen",
]


def _cue(index: int, *lines: str, start: int = 1000, end: int = 7000) -> Cue:
    return Cue(index=index, time=TimeRange(start, end), lines=lines)


@pytest.mark.parametrize("text", ["Hello there.", "x" * 42, "<i>Short and sweet</i>", ""])
def test_text_that_fits_is_returned_unchanged(text: str) -> None:
    assert wrap_text(text) == ([text] if text else [])


def test_wrap_collapses_whitespace() -> None:
    assert wrap_text("  Hello \n  there  ") == ["Hello there"]


def test_single_clause_fits_in_two_lines() -> None:
    text = "I can't believe you did this to me after everything we have been through together"
    [cue] = fix([_cue(1, text)])

    assert cue.lines == (
        "I can't believe you did this to me after",
        "everything we have been through together",
    )
    assert all(visible_len(line) <= 42 for line in cue.lines)
    last_left = visible_words(cue.lines[0])[-1].lower()
    assert last_left not in ENGLISH_RULES.bad_endings


def test_three_lines_become_two_cues_sharing_the_interval() -> None:
    text = "Where are you going tonight? I'm heading downtown. Call me when you get there."
    assert wrap_text(text) == [
        "Where are you going tonight?",
        "I'm heading downtown.",
        "Call me when you get there.",
    ]

    first, second = fix([_cue(1, text, start=1000, end=7000)])

    assert first.time == TimeRange(1000, 4000)
    assert second.time == TimeRange(4000, 7000)
    assert first.lines == ("Where are you going tonight?", "I'm heading downtown.")
    assert second.lines == ("Call me when you get there.",)
    assert (first.index, second.index) == (1, 2)


@pytest.mark.parametrize("text", LONG_TEXTS)
def test_fixed_cues_respect_limits(text: str) -> None:
    cues = fix([_cue(1, "Intro line."), _cue(2, text, start=10000, end=20000), _cue(3, "Outro.")])

    assert [c.index for c in cues] == list(range(1, len(cues) + 1))
    for cue in cues:
        assert 1 <= len(cue.lines) <= 2
        assert all(visible_len(line) <= 42 for line in cue.lines)

    middle = cues[1:-1]
    assert middle[0].time.start == 10000
    assert middle[-1].time.end == 20000
    for prev, nxt in zip(middle, middle[1:]):
        assert prev.time.end == nxt.time.start


@pytest.mark.parametrize("text", LONG_TEXTS)
def test_reflow_keeps_every_visible_character(text: str) -> None:
    lines = wrap_text(text)
    assert "".join("".join(lines).split()) == "".join(text.split())


def test_long_token_is_kept_whole_without_hard_wrap() -> None:
    word = "z" * 50
    limits = LayoutLimits(hard_wrap=False)
    assert wrap_text(f"{word} is long", limits=limits) == [word, "is long"]


def test_long_token_is_sliced_with_hard_wrap() -> None:
    word = "z" * 50
    assert wrap_text(f"{word} is long") == ["z" * 42, "z" * 8, "is long"]


def test_fix_is_idempotent_on_compliant_cues() -> None:
    cues = [
        _cue(4, "Hello there."),
        _cue(9, "We need to talk", "about what happened."),
    ]
    fixed = fix(cues)

    assert [c.lines for c in fixed] == [c.lines for c in cues]
    assert [c.index for c in fixed] == [1, 2]
    assert fix(fixed) == fixed


def test_needs_reflow() -> None:
    assert not needs_reflow(_cue(1, "Fine."))
    assert needs_reflow(_cue(1, "a b", "c d", "e f"))
    assert needs_reflow(_cue(1, "x" * 43))
    assert needs_reflow(_cue(1, "I went home and", "then slept early"))


def test_bad_line_pair_is_rebalanced() -> None:
    [cue] = fix([_cue(1, "I went home and", "then slept early")])
    assert cue.lines == ("I went home and then slept early",)


def test_unparseable_timing_is_reused_for_split_cues() -> None:
    text = "Where are you going tonight? I'm heading downtown. Call me when you get there."
    cue = Cue(index=1, time=None, lines=(text,), raw_time="soon --> later")

    fixed = fix([cue])

    assert len(fixed) == 2
    assert all(c.time is None and c.raw_time == "soon --> later" for c in fixed)


def test_fix_one_only_touches_the_selected_cue() -> None:
    long_text = "Where are you going tonight? I'm heading downtown. Call me when you get there."
    cues = [_cue(1, "x" * 60), _cue(2, long_text), _cue(3, "Bye.")]

    fixed = fix_one(cues, 2)

    assert [c.index for c in fixed] == [1, 2, 3, 4]
    assert fixed[0].lines == ("x" * 60,)
    assert fixed[-1].lines == ("Bye.",)
    assert len(fixed[1].lines) == 2


@pytest.mark.parametrize("position", [0, 4, -1])
def test_fix_one_rejects_missing_position(position: int) -> None:
    cues = [_cue(1, "a"), _cue(2, "b"), _cue(3, "c")]
    with pytest.raises(CueNotFoundError):
        fix_one(cues, position)


def test_group_lines_and_renumber() -> None:
    assert group_lines(["a", "b", "c"], 2) == [("a", "b"), ("c",)]
    assert group_lines([], 2) == [()]
    assert [c.index for c in renumber([_cue(7, "a"), _cue(7, "b")])] == [1, 2]


def test_standalone_closing_tag_never_becomes_its_own_cue() -> None:
    text = "Where are you going tonight? I'm heading downtown. </i>"

    fixed = fix([_cue(1, text)])

    assert fixed == [
        _cue(1, "Where are you going tonight?", "I'm heading downtown. </i>"),
    ]
    assert all(visible_len(line) > 0 for cue in fixed for line in cue.lines)


def test_capitalized_pair_across_sentences_is_reflowed() -> None:
    cue = _cue(1, "We flew to Paris.", "London was next.")

    assert needs_reflow(cue)
    [fixed] = fix([cue])
    assert fixed.lines == ("We flew to Paris. London was next.",)


def test_inverted_interval_is_reused_for_split_cues() -> None:
    text = "Where are you going tonight? I'm heading downtown. Call me when you get there."
    fixed = fix([_cue(1, text, start=5000, end=1000)])

    assert len(fixed) == 2
    assert all(c.time == TimeRange(5000, 1000) for c in fixed)
