from __future__ import annotations

from subreflow.exceptions import ConfigurationError
from subreflow.rules.base import RuleSet
from subreflow.rules.english import ENGLISH_RULES

RULESETS: dict[str, RuleSet] = {
    ENGLISH_RULES.id: ENGLISH_RULES,
}


def list_rulesets() -> list[str]:
    return sorted(RULESETS)


def get_rules(language: str) -> RuleSet:
    key = language.strip().lower()
    if key not in RULESETS:
        raise ConfigurationError(
            f"No rule tables for language '{language}'. Available: {', '.join(list_rulesets())}."
        )
    return RULESETS[key]
