"""
SubRip document codec.

`parse` is total: any text yields a (possibly empty) cue list. Blocks missing
an index get their 1-based position, and a timing line that does not parse
is kept verbatim on the cue instead of failing the document.
"""

from __future__ import annotations

import re
from typing import Sequence

from subreflow.domain.cue import Cue, TimeRange
from subreflow.exceptions import DocumentFormatError, TimecodeError
from subreflow.utils.logging import get_logger
from subreflow.utils.timecode import TIMING_SEPARATOR, format_time_range, parse_time_range

log = get_logger(__name__)

BLOCK_SPLIT_RE = re.compile(r"\n\s*\n")
INDEX_RE = re.compile(r"[0-9]+")


def _normalize_newlines(document: str) -> str:
    text = document.replace("\r\n", "\n").replace("\r", "\n")
    return text.lstrip("\ufeff").strip()


def _parse_index(line: str | None, position: int) -> int:
    if line is None:
        return position
    candidate = line.strip()
    if INDEX_RE.fullmatch(candidate) and int(candidate) > 0:
        return int(candidate)
    return position


def _parse_timing(line: str) -> TimeRange | None:
    try:
        return parse_time_range(line)
    except TimecodeError:
        log.debug("Unparseable timing line kept verbatim: %r", line)
        return None


def parse(document: str) -> list[Cue]:
    text = _normalize_newlines(document)
    if not text:
        return []

    cues: list[Cue] = []
    for position, block in enumerate(BLOCK_SPLIT_RE.split(text), start=1):
        lines = block.split("\n")
        if TIMING_SEPARATOR in lines[0]:
            # No index line; the block opens with its timing.
            index_line, timing, text_lines = None, lines[0], lines[1:]
        else:
            index_line = lines[0]
            timing = lines[1] if len(lines) > 1 else ""
            text_lines = lines[2:]
        cues.append(
            Cue(
                index=_parse_index(index_line, position),
                time=_parse_timing(timing),
                lines=tuple(text_lines),
                raw_time=timing.strip(),
            )
        )
    log.debug("Parsed %d cue(s)", len(cues))
    return cues


def build(cues: Sequence[Cue]) -> str:
    """Serialize cues as SubRip text, numbering them 1..n in order."""
    blocks: list[str] = []
    for i, cue in enumerate(cues, start=1):
        timing = format_time_range(cue.time) if cue.time is not None else cue.raw_time
        blocks.append("\n".join([str(i), timing, *cue.lines]))
    return "\n\n".join(blocks)


def ensure_recognizable(cues: Sequence[Cue]) -> None:
    """Raise DocumentFormatError unless at least one block carries a timing line."""
    if not any(cue.time is not None or TIMING_SEPARATOR in cue.raw_time for cue in cues):
        raise DocumentFormatError("No SubRip timing lines found; input does not look like an .srt document.")
