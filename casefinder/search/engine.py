"""Search engine facade for use case catalogs.

The engine ties together filtering, scoring, sorting and caching for
query searches, and exposes the query-independent helpers (related
records, suggestions, filter options) with the engine's configuration.
Each engine owns its cache, so separate engines never share results.
"""

import logging
import time
from collections.abc import Sequence
from typing import Any

from ..core.models import FilterSet, ScoredUseCase, UseCase, has_active_filters
from .cache import QueryCache, make_cache_key
from .config import SearchConfig
from .facets import (
    FacetValue,
    FilterOptions,
    count_filter_values,
    extract_filter_options,
)
from .filters import apply_filters
from .fuzzy import FuzzyScorer
from .scoring import ExactScorer, normalize_query
from .similarity import SimilarityScorer
from .sorting import SortKey, sort_records
from .suggestions import suggest

logger = logging.getLogger(__name__)


class SearchEngine:
    """Search engine for use case records.

    Coordinates filtering, exact or fuzzy scoring, sorting and result
    caching. Records are supplied per call and never modified.
    """

    def __init__(
        self,
        config: SearchConfig | None = None,
        cache: QueryCache | None = None,
    ):
        """Initialize search engine.

        Args:
            config: Scoring weights and options (default: SearchConfig())
            cache: Result cache (default: a new QueryCache)
        """
        self.config = config or SearchConfig()
        self.cache = cache if cache is not None else QueryCache()
        self.exact_scorer = ExactScorer(self.config.exact)
        self.fuzzy_scorer = FuzzyScorer(self.config.fuzzy)
        self.similarity_scorer = SimilarityScorer(self.config.similarity)
        self._last_query_time_ms = 0

    def search(
        self,
        records: Sequence[UseCase],
        query: str | None,
        filters: FilterSet | None = None,
        sort_key: str | SortKey = SortKey.RELEVANCE,
    ) -> list[ScoredUseCase]:
        """Execute an exact-match search.

        An empty query with no active filters returns nothing. An empty
        query with active filters returns every filtered record with a
        score of 0, ordered by ``sort_key``.

        Args:
            records: Full record collection
            query: Free-text query
            filters: Mapping of dimension name to accepted values
            sort_key: Sort order for results

        Returns:
            Scored records in sorted order
        """
        if not normalize_query(query) and not has_active_filters(filters):
            return []

        return self._cached(
            make_cache_key(query, filters, sort_key, self.exact_scorer.mode),
            lambda: self._exact_search(records, query, filters, sort_key),
        )

    def fuzzy_search(
        self,
        records: Sequence[UseCase],
        query: str | None,
        filters: FilterSet | None = None,
    ) -> list[ScoredUseCase]:
        """Execute an approximate search.

        Args:
            records: Full record collection
            query: Free-text query, possibly misspelled
            filters: Applied to the fuzzy matches afterwards

        Returns:
            Scored matches, closest first
        """
        if not normalize_query(query):
            return []

        return self._cached(
            make_cache_key(query, filters, SortKey.RELEVANCE, self.fuzzy_scorer.mode),
            lambda: self.fuzzy_scorer.search(records, query or "", filters),
        )

    def sort(self, records: Sequence[UseCase], sort_key: str | SortKey) -> list:
        """Order records by a sort key (unknown keys keep the order)."""
        return sort_records(records, sort_key)

    def related(
        self,
        record: UseCase | None,
        records: Sequence[UseCase],
        limit: int | None = None,
    ) -> list[ScoredUseCase]:
        """Find records related to a record.

        Args:
            record: Reference record
            records: Collection to draw candidates from
            limit: Maximum results (default: config.related_limit)
        """
        if limit is None:
            limit = self.config.related_limit
        return self.similarity_scorer.related(record, records, limit)

    def suggest(self, records: Sequence[UseCase], partial: str | None) -> list[str]:
        """Get autocomplete suggestions for partial input."""
        return suggest(records, partial, self.config.suggestion_limit)

    def extract_filter_options(self, records: Sequence[UseCase]) -> FilterOptions:
        """Get the distinct values of every filter dimension."""
        return extract_filter_options(records)

    def count_filter_values(
        self, records: Sequence[UseCase]
    ) -> dict[str, list[FacetValue]]:
        """Get per-value record counts for every filter dimension."""
        return count_filter_values(records)

    def clear_cache(self) -> None:
        """Forget all cached results, e.g. after the catalog reloads."""
        self.cache.clear()
        logger.debug("Search cache cleared (generation %d)", self.cache.generation)

    def get_statistics(self) -> dict[str, Any]:
        """Get engine and cache statistics."""
        return {
            "engine": {
                "last_query_time_ms": self._last_query_time_ms,
                "fuzzy_threshold": self.config.fuzzy.threshold,
            },
            "cache": self.cache.get_statistics(),
        }

    def _exact_search(
        self,
        records: Sequence[UseCase],
        query: str | None,
        filters: FilterSet | None,
        sort_key: str | SortKey,
    ) -> list[ScoredUseCase]:
        candidates = apply_filters(records, filters)

        if not normalize_query(query):
            results = [ScoredUseCase.from_use_case(r, 0.0) for r in candidates]
        else:
            results = self.exact_scorer.rank(candidates, query or "")

        return sort_records(results, sort_key)

    def _cached(self, key, compute) -> list[ScoredUseCase]:
        generation = self.cache.generation
        cached = self.cache.get(key)
        if cached is not None:
            logger.debug("Cache hit for %r", key)
            return cached

        start_time = time.perf_counter()
        results = compute()
        self._last_query_time_ms = int((time.perf_counter() - start_time) * 1000)

        if not self.cache.put(key, results, generation=generation):
            logger.debug("Discarded result computed before a cache clear: %r", key)
        else:
            logger.debug(
                "Cached %d results for %r in %dms",
                len(results),
                key,
                self._last_query_time_ms,
            )
        return list(results)


def create_engine(config: SearchConfig | None = None) -> SearchEngine:
    """Create a SearchEngine with its own cache."""
    return SearchEngine(config=config)
