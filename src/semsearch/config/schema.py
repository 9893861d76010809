"""Pydantic models for semsearch configuration."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class OutputFormat(str, Enum):
    """Supported output formats."""

    RICH = "rich"
    PLAIN = "plain"
    JSON = "json"


class SearchOptions(BaseModel):
    """Scoring options for a search.

    Field names are snake_case; the camelCase spellings (``scoreWeights``,
    ``minScore``, ...) are accepted as aliases.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    score_weights: dict[str, float] = Field(default_factory=dict)
    min_score: float = 0.0
    fuzzy_threshold: float = Field(default=0.7, ge=0.0, le=1.0)
    number_tolerance: float = Field(default=0.15, ge=0.0, le=1.0)
    enable_fuzzy: bool = True
    enable_numeric_search: bool = True
    enable_partial_phonetic: bool = True
    min_phonetic_length: int = Field(default=3, ge=1)

    @field_validator("score_weights")
    @classmethod
    def _weights_positive(cls, weights: dict[str, float]) -> dict[str, float]:
        for field_name, weight in weights.items():
            if weight <= 0:
                raise ValueError(
                    f"weight for '{field_name}' must be positive, got {weight}"
                )
        return weights

    def weight_for(self, field_name: str) -> float:
        """Weight of a field, defaulting to 1."""
        return self.score_weights.get(field_name, 1.0)


class CacheConfig(BaseModel):
    """Cache configuration."""

    phonetic_cache_size: int = Field(default=200, ge=1)
    result_cache_size: int = Field(default=100, ge=1)


class SessionConfig(BaseModel):
    """Interactive session configuration."""

    debounce_ms: int = Field(default=200, ge=0)


class OutputConfig(BaseModel):
    """Output configuration."""

    default_format: OutputFormat = OutputFormat.RICH
    show_scores: bool = False
    color: bool = True


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    file: Path | None = None  # Default: no file logging
    json_format: bool = False


class SemSearchConfig(BaseModel):
    """Root configuration for semsearch."""

    default_preset: str | None = None
    search: SearchOptions = Field(default_factory=SearchOptions)
    cache: CacheConfig = Field(default_factory=CacheConfig)
    session: SessionConfig = Field(default_factory=SessionConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
