from __future__ import annotations

import re

SENTENCE_END_RE = re.compile(r"[.!?]$")
CLAUSE_END_RE = re.compile(r"[;:,]$")
STRONG_PUNCT_RE = re.compile(r"[.!?;:,]$")
_EDGE_PUNCT_RE = re.compile(r"^[\"'“‘(\[¿¡-]+|[\"'”’)\].,!?;:…-]+$")


def normalize_text(text: str) -> str:
    return " ".join(text.split()).strip()


def bare_word(word: str) -> str:
    """Strip surrounding quotes/punctuation so a word can be looked up in a rule table."""
    return _EDGE_PUNCT_RE.sub("", word.strip())


def fold_apostrophes(word: str) -> str:
    return word.replace("’", "'").replace("‘", "'")


def ends_sentence(word: str) -> bool:
    return bool(SENTENCE_END_RE.search(word))


def ends_clause(word: str) -> bool:
    return bool(CLAUSE_END_RE.search(word))


def ends_strong_punct(word: str) -> bool:
    return bool(STRONG_PUNCT_RE.search(word))
