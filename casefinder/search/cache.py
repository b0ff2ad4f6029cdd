"""Memoization of search results.

The cache maps (query, filters, sort key, mode) to a result list and
never expires entries on its own; callers clear it when the catalog
changes. Every clear starts a new generation, and a result computed
under an earlier generation is discarded when stored, so no lookup made
after ``clear()`` returns can see data written before it.
"""

import threading
from collections.abc import Sequence
from typing import Any

from ..core.models import FilterSet, normalize_filters

CacheKey = tuple[str, tuple[tuple[str, tuple[str, ...]], ...], str, str]


def serialize_filters(filters: FilterSet | None) -> tuple:
    """Turn a filter set into a hashable, order-independent tuple."""
    normalized = normalize_filters(filters)
    return tuple(
        sorted(
            (dimension.value, tuple(sorted(values)))
            for dimension, values in normalized.items()
        )
    )


def make_cache_key(
    query: str | None,
    filters: FilterSet | None,
    sort_key: Any,
    mode: str = "exact",
) -> CacheKey:
    """Build the cache key for a search call.

    The query is lower-cased but not trimmed, since surrounding spaces
    change exact-match scores.
    """
    sort_name = getattr(sort_key, "value", sort_key)
    return (
        (query or "").lower(),
        serialize_filters(filters),
        "" if sort_name is None else str(sort_name),
        mode,
    )


class QueryCache:
    """Thread-safe result cache with explicit invalidation."""

    def __init__(self):
        self._entries: dict[CacheKey, tuple] = {}
        self._lock = threading.RLock()
        self._generation = 0
        self._hits = 0
        self._misses = 0

    @property
    def generation(self) -> int:
        """Current cache generation, incremented by every clear."""
        with self._lock:
            return self._generation

    def get(self, key: CacheKey) -> list | None:
        """Look up a cached result.

        Returns:
            A fresh list of the cached results, or None on a miss
        """
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                self._misses += 1
                return None
            self._hits += 1
            return list(entry)

    def put(
        self, key: CacheKey, results: Sequence, generation: int | None = None
    ) -> bool:
        """Store a result.

        Args:
            key: Cache key
            results: Result sequence to store (copied)
            generation: Generation the result was computed under; stale
                generations are ignored

        Returns:
            True if the result was stored
        """
        with self._lock:
            if generation is not None and generation != self._generation:
                return False
            self._entries[key] = tuple(results)
            return True

    def clear(self) -> None:
        """Drop every entry and start a new generation."""
        with self._lock:
            self._entries.clear()
            self._generation += 1

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def get_statistics(self) -> dict[str, int]:
        """Get cache statistics."""
        with self._lock:
            return {
                "entries": len(self._entries),
                "generation": self._generation,
                "hits": self._hits,
                "misses": self._misses,
            }
