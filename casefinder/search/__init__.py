"""Search functionality for use case catalogs.

This module provides exact and fuzzy search, filtering, sorting,
related-record recommendations, autocomplete suggestions and result
caching over an in-memory collection of use cases.

Main components:
- SearchEngine: Search orchestrator owning a QueryCache
- ExactScorer / FuzzyScorer: Mutually exclusive scoring modes
- FilterEngine: Attribute filters
- SimilarityScorer: Related records
"""

from .cache import QueryCache, make_cache_key, serialize_filters
from .config import (
    DEFAULT_CONFIG,
    ExactWeights,
    FuzzyOptions,
    SearchConfig,
    SimilarityWeights,
)
from .engine import SearchEngine, create_engine
from .facets import (
    FacetValue,
    FilterOptions,
    count_filter_values,
    extract_filter_options,
)
from .filters import FilterEngine, apply_filters
from .fuzzy import FuzzyScorer
from .scoring import ExactScorer, Scorer, normalize_query
from .similarity import SimilarityScorer, related
from .sorting import SortKey, collation_key, sort_records
from .suggestions import suggest

__all__ = [
    # Main classes
    "SearchEngine",
    "create_engine",
    # Configuration
    "SearchConfig",
    "ExactWeights",
    "FuzzyOptions",
    "SimilarityWeights",
    "DEFAULT_CONFIG",
    # Scoring
    "Scorer",
    "ExactScorer",
    "FuzzyScorer",
    "normalize_query",
    # Filtering and facets
    "FilterEngine",
    "apply_filters",
    "FilterOptions",
    "FacetValue",
    "extract_filter_options",
    "count_filter_values",
    # Ordering
    "SortKey",
    "sort_records",
    "collation_key",
    # Recommendations and suggestions
    "SimilarityScorer",
    "related",
    "suggest",
    # Caching
    "QueryCache",
    "make_cache_key",
    "serialize_filters",
]
