from __future__ import annotations

from subreflow.rules.base import RuleSet

ENGLISH_RULES = RuleSet(
    id="en",
    articles=frozenset({"a", "an", "the"}),
    determiners=frozenset(
        {
            "my",
            "your",
            "his",
            "her",
            "its",
            "our",
            "their",
            "this",
            "that",
            "these",
            "those",
        }
    ),
    subject_pronouns=frozenset({"i", "you", "he", "she", "it", "we", "they"}),
    auxiliaries=frozenset(
        {
            "am",
            "is",
            "are",
            "was",
            "were",
            "be",
            "been",
            "being",
            "have",
            "has",
            "had",
            "do",
            "does",
            "did",
            "will",
            "would",
            "shall",
            "should",
            "can",
            "could",
            "may",
            "might",
            "must",
        }
    ),
    conjunctions=frozenset(
        {
            "and",
            "but",
            "or",
            "so",
            "because",
            "however",
            "although",
            "though",
            "while",
            "when",
            "if",
        }
    ),
    prepositions=frozenset(
        {
            "to",
            "of",
            "in",
            "on",
            "at",
            "with",
            "for",
            "from",
            "into",
            "onto",
            "over",
            "under",
            "about",
            "after",
            "before",
            "by",
            "around",
            "through",
            "between",
            "without",
            "within",
        }
    ),
    phrasal_verbs=frozenset(
        {
            ("give", "up"),
            ("give", "in"),
            ("take", "off"),
            ("take", "over"),
            ("put", "on"),
            ("put", "off"),
            ("get", "up"),
            ("get", "out"),
            ("get", "over"),
            ("pick", "up"),
            ("turn", "off"),
            ("turn", "on"),
            ("find", "out"),
            ("figure", "out"),
            ("come", "back"),
            ("go", "on"),
            ("set", "up"),
            ("carry", "on"),
            ("run", "out"),
            ("work", "out"),
            ("break", "down"),
            ("calm", "down"),
            ("sit", "down"),
            ("stand", "up"),
            ("wake", "up"),
            ("hold", "on"),
            ("hang", "on"),
            ("look", "after"),
            ("look", "for"),
            ("shut", "up"),
        }
    ),
    fixed_expressions=frozenset(
        {
            ("as", "well", "as"),
            ("as", "soon", "as"),
            ("as", "long", "as"),
            ("in", "front", "of"),
            ("in", "order", "to"),
            ("in", "spite", "of"),
            ("a", "lot", "of"),
            ("at", "the", "same"),
            ("by", "the", "way"),
            ("on", "the", "other"),
            ("out", "of", "here"),
            ("all", "of", "a"),
            ("kind", "of", "like"),
            ("each", "and", "every"),
        }
    ),
    bad_endings=frozenset(
        {
            "and",
            "or",
            "but",
            "so",
            "to",
            "of",
            "in",
            "on",
            "at",
            "with",
            "for",
            "this",
            "that",
            "it",
            "is",
            "was",
            "were",
            "be",
            "been",
            "being",
        }
    ),
    dangling_conjunctions=frozenset({"and", "but", "or", "so"}),
)
