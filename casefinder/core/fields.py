"""Field vocabularies for use case records.

Defines the filter dimensions understood by the filter engine and the
risk levels recognised when ordering records.
"""

from enum import Enum


class FilterDimension(str, Enum):
    """Filter dimensions a caller may constrain.

    Values are the wire names used by the UI layer when it builds a
    filter set and when it reads the available filter options.
    """

    SURFACES = "surfaces"
    MODES = "modes"
    RISK_LEVELS = "riskLevels"
    LANGUAGES = "languages"
    CATEGORIES = "categories"


class RiskLevel(str, Enum):
    """Known risk levels for a use case."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


# Matches records that declare no languages at all.
ALL_LANGUAGES = "all"

# Which record attribute each dimension reads.
DIMENSION_ATTRIBUTES = {
    FilterDimension.SURFACES: "copilot_surface",
    FilterDimension.MODES: "mode",
    FilterDimension.RISK_LEVELS: "risk_level",
    FilterDimension.LANGUAGES: "languages",
    FilterDimension.CATEGORIES: "category",
}

SET_VALUED_DIMENSIONS = frozenset(
    {FilterDimension.SURFACES, FilterDimension.MODES, FilterDimension.LANGUAGES}
)


def dimension_from_key(key: str) -> FilterDimension | None:
    """Resolve a filter key to a dimension, or None if it is unknown."""
    if isinstance(key, FilterDimension):
        return key
    try:
        return FilterDimension(key)
    except ValueError:
        return None
