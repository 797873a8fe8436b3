from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Tuple


@dataclass(frozen=True)
class RuleSet:
    """
    Closed word-class tables for one language.

    All entries are lowercase. The scoring and splitting code only ever reads
    these tables, so a locale variant is a new RuleSet, not a code change.
    """

    id: str
    articles: FrozenSet[str]
    determiners: FrozenSet[str]
    subject_pronouns: FrozenSet[str]
    auxiliaries: FrozenSet[str]
    conjunctions: FrozenSet[str]
    prepositions: FrozenSet[str]
    phrasal_verbs: FrozenSet[Tuple[str, str]]
    fixed_expressions: FrozenSet[Tuple[str, str, str]]
    bad_endings: FrozenSet[str]
    dangling_conjunctions: FrozenSet[str]
    negation_suffixes: Tuple[str, ...] = ("n't", "'t")
    comparative_suffixes: Tuple[str, ...] = ("er", "est")
    expression_pairs: FrozenSet[Tuple[str, str]] = field(init=False)
    # Words that bind to the word after them.
    glue_words: FrozenSet[str] = field(init=False)

    def __post_init__(self) -> None:
        pairs = set()
        for first, second, third in self.fixed_expressions:
            pairs.add((first, second))
            pairs.add((second, third))
        object.__setattr__(self, "expression_pairs", frozenset(pairs))
        object.__setattr__(
            self,
            "glue_words",
            self.articles | self.determiners | self.subject_pronouns | self.auxiliaries,
        )
