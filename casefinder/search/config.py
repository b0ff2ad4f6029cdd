"""Scoring weights and tuning options for search.

Every constant the scorers rely on lives here so that tests can assert
on documented values and deployments can tune ranking through the
configuration file without touching matching logic.
"""

from collections.abc import Mapping
from typing import Any

import msgspec

from ..exceptions import ConfigError


class ExactWeights(msgspec.Struct, frozen=True, kw_only=True):
    """Points awarded by the exact-match scorer."""

    title_equals: float = 200
    title_contains: float = 100
    category_contains: float = 50
    description_contains: float = 30
    tag_contains: float = 20
    prompt_contains: float = 15
    term_hit: float = 5


class SimilarityWeights(msgspec.Struct, frozen=True, kw_only=True):
    """Points awarded when comparing two records for relatedness."""

    same_category: float = 50
    same_subcategory: float = 30
    shared_surface: float = 10
    shared_mode: float = 10
    shared_tag: float = 5
    same_risk_level: float = 10


class FuzzyOptions(msgspec.Struct, frozen=True, kw_only=True):
    """Approximate matching settings.

    ``threshold`` is the largest accepted distance on a 0-1 scale where
    0 is a perfect match. ``field_weights`` are normalised to sum to 1
    before use.
    """

    field_weights: dict[str, float] = msgspec.field(
        default_factory=lambda: {
            "title": 0.4,
            "description": 0.2,
            "category": 0.15,
            "tags": 0.15,
            "example_prompts": 0.1,
        }
    )
    threshold: float = 0.4
    min_match_length: int = 2

    def __post_init__(self):
        if not 0 <= self.threshold <= 1:
            raise ValueError("threshold must be between 0 and 1")
        if self.min_match_length < 1:
            raise ValueError("min_match_length must be at least 1")
        if any(weight < 0 for weight in self.field_weights.values()):
            raise ValueError("field weights must not be negative")

    def normalized_weights(self) -> dict[str, float]:
        """Get field weights scaled to sum to 1."""
        total = sum(self.field_weights.values())
        if total <= 0:
            return {}
        return {
            name: weight / total
            for name, weight in self.field_weights.items()
            if weight > 0
        }


class SearchConfig(msgspec.Struct, frozen=True, kw_only=True):
    """Complete tuning configuration for a search engine."""

    exact: ExactWeights = msgspec.field(default_factory=ExactWeights)
    similarity: SimilarityWeights = msgspec.field(default_factory=SimilarityWeights)
    fuzzy: FuzzyOptions = msgspec.field(default_factory=FuzzyOptions)
    suggestion_limit: int = 10
    related_limit: int = 5

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "SearchConfig":
        """Build a configuration from a plain mapping.

        Missing sections and keys keep their defaults.

        Raises:
            ConfigError: If a value has the wrong type or is out of range
        """
        if not data:
            return cls()
        try:
            return msgspec.convert(dict(data), type=cls)
        except (msgspec.ValidationError, ValueError, TypeError) as e:
            raise ConfigError(f"Invalid search configuration: {e}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain mapping suitable for YAML output."""
        return msgspec.to_builtins(self)


DEFAULT_CONFIG = SearchConfig()
