"""Core data models for use case records.

This module defines the immutable record schema the search engine works
on. Records are created by the catalog loader, held read-only for the
lifetime of the engine, and never mutated: scoring produces new
ScoredUseCase instances that carry the original fields plus a score.

Key components:
- UseCase: Immutable catalog entry
- Metrics: Optional measured benefits of a use case
- ScoredUseCase: UseCase annotated with a relevance score
- normalize_filters: Canonical form of a caller-supplied filter set
"""

from collections.abc import Iterable, Mapping
from typing import Any

import msgspec

from .fields import FilterDimension, dimension_from_key


class Metrics(msgspec.Struct, frozen=True, kw_only=True):
    """Measured impact of a use case."""

    time_saved_min: float | None = None


class UseCase(msgspec.Struct, frozen=True, kw_only=True):
    """Immutable catalog entry describing one use case.

    Optional attributes default to None so that "absent" stays distinct
    from "present but empty". Set-valued labels use frozenset; tags and
    example prompts keep their display order.
    """

    id: str
    title: str
    description: str | None = None
    category: str | None = None
    subcategory: str | None = None
    tags: tuple[str, ...] = ()
    example_prompts: tuple[str, ...] = ()
    copilot_surface: frozenset[str] | None = None
    mode: frozenset[str] | None = None
    risk_level: str | None = None
    languages: frozenset[str] | None = None
    metrics: Metrics | None = None

    @property
    def time_saved_min(self) -> float | None:
        """Minutes saved per use, if measured."""
        if self.metrics is None:
            return None
        return self.metrics.time_saved_min

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-compatible dictionary.

        Tuples and label sets become lists; set members are sorted so the
        output is stable.
        """
        return msgspec.json.decode(msgspec.json.encode(self, order="deterministic"))


class ScoredUseCase(UseCase, frozen=True, kw_only=True):
    """A use case together with the score it received."""

    score: float = 0.0

    @classmethod
    def from_use_case(cls, record: UseCase, score: float) -> "ScoredUseCase":
        """Build a scored copy of a record, leaving the record untouched."""
        fields = {name: getattr(record, name) for name in UseCase.__struct_fields__}
        return cls(**fields, score=score)


FilterSet = Mapping[str, Iterable[str]]


def normalize_filters(
    filters: FilterSet | None,
) -> dict[FilterDimension, frozenset[str]]:
    """Canonicalise a filter set.

    Unknown dimension keys and dimensions with no accepted values are
    dropped, since neither constrains anything.
    """
    if not filters:
        return {}

    normalized = {}
    for key, values in filters.items():
        dimension = dimension_from_key(key)
        if dimension is None or values is None:
            continue
        if isinstance(values, str):
            values = [values]
        accepted = frozenset(values)
        if accepted:
            normalized[dimension] = accepted
    return normalized


def has_active_filters(filters: FilterSet | None) -> bool:
    """Check whether a filter set constrains at least one dimension."""
    return bool(normalize_filters(filters))
