from __future__ import annotations

from typing import Any

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from subreflow.domain.layout import (
    MAX_CHARS_PER_LINE,
    MAX_LINES_PER_CUE,
    MIN_SPLIT_SCORE,
    MIN_TAIL_CHARS,
    MIN_TAIL_WORDS,
    LayoutLimits,
)
from subreflow.exceptions import ConfigurationError


class Settings(BaseSettings):
    """
    Runtime configuration for subreflow.

    All settings are loaded from environment variables with the
    `SUBREFLOW_` prefix and optional `.env` support. CLI flags override
    individual fields through `load_settings`.
    """

    model_config = SettingsConfigDict(
        env_prefix="SUBREFLOW_",
        env_file=".env",
        extra="ignore",
    )

    # ------------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------------
    max_chars: int = Field(
        default=MAX_CHARS_PER_LINE,
        ge=1,
        description="Maximum visible characters per subtitle line.",
    )
    max_lines: int = Field(
        default=MAX_LINES_PER_CUE,
        ge=1,
        description="Maximum lines per cue.",
    )
    min_tail_chars: int = Field(
        default=MIN_TAIL_CHARS,
        ge=0,
        description="Shortest visible right-hand side a split may leave.",
    )
    min_tail_words: int = Field(
        default=MIN_TAIL_WORDS,
        ge=0,
        description="Fewest words a split may leave on the right-hand side.",
    )
    min_split_score: int = Field(
        default=MIN_SPLIT_SCORE,
        description="Best split scores below this fall back to greedy filling.",
    )
    hard_wrap: bool = Field(
        default=True,
        description="Slice words longer than max_chars so every line fits.",
    )

    # ------------------------------------------------------------------
    # Language / IO
    # ------------------------------------------------------------------
    language: str = Field(
        default="en",
        description="Rule tables used for split decisions (e.g. en).",
    )
    encoding: str = Field(
        default="utf-8",
        description="Encoding used to read and write subtitle files.",
    )

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR).",
    )

    def limits(self) -> LayoutLimits:
        return LayoutLimits(
            max_chars=self.max_chars,
            max_lines=self.max_lines,
            min_tail_chars=self.min_tail_chars,
            min_tail_words=self.min_tail_words,
            min_split_score=self.min_split_score,
            hard_wrap=self.hard_wrap,
        )

    # ------------------------------------------------------------------
    # Public / safe export
    # ------------------------------------------------------------------
    def to_public_dict(self) -> dict:
        """Return settings suitable for logging or CLI display."""
        return {
            "max_chars": self.max_chars,
            "max_lines": self.max_lines,
            "min_tail_chars": self.min_tail_chars,
            "min_tail_words": self.min_tail_words,
            "min_split_score": self.min_split_score,
            "hard_wrap": self.hard_wrap,
            "language": self.language,
            "encoding": self.encoding,
            "log_level": self.log_level,
        }


def load_settings(**overrides: Any) -> Settings:
    """Build Settings from the environment, applying non-None overrides."""
    values = {key: value for key, value in overrides.items() if value is not None}
    try:
        return Settings(**values)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
        )
        raise ConfigurationError(f"Invalid settings: {problems}") from exc
