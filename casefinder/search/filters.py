"""Filtering of use cases by attribute selections.

Each constrained dimension narrows the candidate set (dimensions are
ANDed); within a dimension a record passes if it carries any accepted
value (values are ORed). A record lacking the attribute fails a
constrained dimension, with one exception: for ``languages`` the
sentinel ``"all"`` also accepts records that declare no languages.
"""

from collections.abc import Iterable

from ..core.fields import (
    ALL_LANGUAGES,
    DIMENSION_ATTRIBUTES,
    SET_VALUED_DIMENSIONS,
    FilterDimension,
)
from ..core.models import FilterSet, UseCase, normalize_filters


class FilterEngine:
    """Filters records against a normalised filter set."""

    def __init__(self, filters: FilterSet | None = None):
        """Initialize with a filter set.

        Args:
            filters: Mapping of dimension name to accepted values. Unknown
                dimensions and empty selections are ignored.
        """
        self.filters = normalize_filters(filters)

    @property
    def is_active(self) -> bool:
        """Whether any dimension is constrained."""
        return bool(self.filters)

    def apply(self, records: Iterable[UseCase]) -> list[UseCase]:
        """Return the records passing every constrained dimension, in order."""
        if not self.filters:
            return list(records)
        return [record for record in records if self.matches(record)]

    def matches(self, record: UseCase) -> bool:
        """Check a single record against all constrained dimensions."""
        for dimension, accepted in self.filters.items():
            if not self._matches_dimension(record, dimension, accepted):
                return False
        return True

    def _matches_dimension(
        self, record: UseCase, dimension: FilterDimension, accepted: frozenset[str]
    ) -> bool:
        value = getattr(record, DIMENSION_ATTRIBUTES[dimension])

        if dimension == FilterDimension.LANGUAGES:
            if value and not accepted.isdisjoint(value):
                return True
            return ALL_LANGUAGES in accepted and not value

        if value is None:
            return False

        if dimension in SET_VALUED_DIMENSIONS:
            return not accepted.isdisjoint(value)

        return value in accepted


def apply_filters(
    records: Iterable[UseCase], filters: FilterSet | None
) -> list[UseCase]:
    """Filter records by a filter set.

    Args:
        records: Records to filter
        filters: Mapping of dimension name to accepted values

    Returns:
        Records satisfying every constrained dimension, in input order
    """
    return FilterEngine(filters).apply(records)
