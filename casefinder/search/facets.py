"""Filter options derived from a catalog.

This module extracts the distinct values present in each filter
dimension so a UI can offer them as choices, and counts how many
records carry each value.
"""

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field

from ..core.fields import DIMENSION_ATTRIBUTES, SET_VALUED_DIMENSIONS, FilterDimension
from ..core.models import UseCase


@dataclass
class FacetValue:
    """Individual facet value with count."""

    value: str
    count: int

    def __str__(self) -> str:
        return f"{self.value} ({self.count})"


@dataclass
class FilterOptions:
    """Distinct values available for each filter dimension."""

    surfaces: list[str] = field(default_factory=list)
    modes: list[str] = field(default_factory=list)
    risk_levels: list[str] = field(default_factory=list)
    languages: list[str] = field(default_factory=list)
    categories: list[str] = field(default_factory=list)

    def get(self, dimension: FilterDimension | str) -> list[str]:
        """Get the options for a dimension."""
        return self.to_dict().get(FilterDimension(dimension).value, [])

    def to_dict(self) -> dict[str, list[str]]:
        """Convert to a mapping keyed by dimension wire name."""
        return {
            FilterDimension.SURFACES.value: self.surfaces,
            FilterDimension.MODES.value: self.modes,
            FilterDimension.RISK_LEVELS.value: self.risk_levels,
            FilterDimension.LANGUAGES.value: self.languages,
            FilterDimension.CATEGORIES.value: self.categories,
        }


def dimension_values(record: UseCase, dimension: FilterDimension) -> list[str]:
    """Extract the values a record carries for a dimension."""
    value = getattr(record, DIMENSION_ATTRIBUTES[dimension])
    if value is None:
        return []
    if dimension in SET_VALUED_DIMENSIONS:
        return list(value)
    if not value:
        return []
    return [value]


def extract_filter_options(records: Iterable[UseCase]) -> FilterOptions:
    """Collect the sorted distinct values of every filter dimension.

    Args:
        records: Catalog records

    Returns:
        FilterOptions with one sorted, deduplicated list per dimension
    """
    seen: dict[FilterDimension, set[str]] = {d: set() for d in FilterDimension}

    for record in records:
        for dimension in FilterDimension:
            seen[dimension].update(dimension_values(record, dimension))

    return FilterOptions(
        surfaces=sorted(seen[FilterDimension.SURFACES]),
        modes=sorted(seen[FilterDimension.MODES]),
        risk_levels=sorted(seen[FilterDimension.RISK_LEVELS]),
        languages=sorted(seen[FilterDimension.LANGUAGES]),
        categories=sorted(seen[FilterDimension.CATEGORIES]),
    )


def count_filter_values(records: Iterable[UseCase]) -> dict[str, list[FacetValue]]:
    """Count how many records carry each filter value.

    Returns:
        Mapping of dimension wire name to values sorted by count
        descending, then by value
    """
    counters: dict[FilterDimension, Counter] = {d: Counter() for d in FilterDimension}

    for record in records:
        for dimension in FilterDimension:
            counters[dimension].update(set(dimension_values(record, dimension)))

    return {
        dimension.value: [
            FacetValue(value=value, count=count)
            for value, count in sorted(
                counter.items(), key=lambda item: (-item[1], item[0])
            )
        ]
        for dimension, counter in counters.items()
    }
