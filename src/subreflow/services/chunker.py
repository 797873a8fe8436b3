"""
Semantic chunker: breaks normalized cue text into clause-level chunks.

Chunks are built from whole space-separated units, so joining them with
single spaces always reproduces the input exactly. A unit with no visible
text (a standalone tag) never forms a chunk of its own: closing tags ride
with the unit before them, anything else with the unit after.
"""

from __future__ import annotations

import re

from subreflow.rules.base import RuleSet
from subreflow.rules.english import ENGLISH_RULES
from subreflow.services.tokenizer import tokenize, visible_text
from subreflow.utils.text import bare_word

CHUNK_END_RE = re.compile(r"[.!?;]$")


def _is_closing_only(unit: str) -> bool:
    tokens = tokenize(unit)
    return bool(tokens) and all(tok.is_closing_tag for tok in tokens)


def _attach_invisible(units: list[str]) -> list[str]:
    merged: list[str] = []
    pending: list[str] = []
    for unit in units:
        if visible_text(unit).strip():
            merged.append(" ".join([*pending, unit]))
            pending = []
        elif merged and not pending and _is_closing_only(unit):
            merged[-1] = f"{merged[-1]} {unit}"
        else:
            pending.append(unit)
    if pending:
        if merged:
            merged[-1] = " ".join([merged[-1], *pending])
        else:
            merged.append(" ".join(pending))
    return merged


def _split_on_terminators(units: list[str]) -> list[list[str]]:
    chunks: list[list[str]] = []
    current: list[str] = []
    for unit in units:
        current.append(unit)
        if CHUNK_END_RE.search(visible_text(unit).strip()):
            chunks.append(current)
            current = []
    if current:
        chunks.append(current)
    return chunks


def _split_on_conjunctions(units: list[str], conjunctions: frozenset[str]) -> list[list[str]]:
    def is_conj(unit: str) -> bool:
        return bare_word(visible_text(unit)).lower() in conjunctions

    chunks: list[list[str]] = []
    current: list[str] = []
    for i, unit in enumerate(units):
        opens_clause = (
            is_conj(unit)
            and i + 1 < len(units)
            and any(not is_conj(u) for u in current)
        )
        if opens_clause:
            chunks.append(current)
            current = []
        current.append(unit)
    if current:
        chunks.append(current)
    return chunks


def split_semantic_chunks(text: str, *, rules: RuleSet = ENGLISH_RULES) -> list[str]:
    units = _attach_invisible(text.split())
    if not units:
        return []

    by_sentence = _split_on_terminators(units)
    if len(by_sentence) > 1:
        return [" ".join(chunk) for chunk in by_sentence]

    by_clause = _split_on_conjunctions(units, rules.conjunctions)
    if len(by_clause) > 1:
        return [" ".join(chunk) for chunk in by_clause]

    return [" ".join(units)]
