"""Approximate matching for misspelled or partial queries.

The fuzzy scorer compares the query against weighted record fields with
rapidfuzz. Each field's best similarity is turned into a distance on a
0-1 scale (0 is a perfect match); fields within the distance threshold
count as matched and their distances are combined into a single record
distance, weighting important fields more heavily. The reported score is
``(1 - distance) * 100`` so that higher means better, as with the exact
scorer, although the two scales are not comparable.
"""

import sys
from collections.abc import Iterable

from rapidfuzz import fuzz
from rapidfuzz.utils import default_process

from ..core.models import FilterSet, ScoredUseCase, UseCase
from .config import FuzzyOptions
from .filters import apply_filters
from .scoring import Scorer

EPSILON = sys.float_info.epsilon


def field_values(record: UseCase, field_name: str) -> list[str]:
    """Get the text values of a record field as a list."""
    value = getattr(record, field_name, None)
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    return [v for v in value if isinstance(v, str)]


def similarity(query: str, text: str) -> float:
    """Similarity of two processed strings on a 0-100 scale.

    Texts at least as long as the query are searched for the best
    matching window; shorter texts are compared as a whole so a long
    query cannot fully match a short tag.
    """
    if not query or not text:
        return 0.0
    if len(text) >= len(query):
        return fuzz.partial_ratio(query, text)
    return fuzz.ratio(query, text)


class FuzzyScorer(Scorer):
    """Edit-distance tolerant scorer over weighted fields."""

    mode = "fuzzy"

    def __init__(self, options: FuzzyOptions | None = None):
        """Initialize scorer.

        Args:
            options: Field weights, threshold and minimum query length
        """
        self.options = options or FuzzyOptions()
        self.weights = self.options.normalized_weights()

    def distance(self, record: UseCase, query: str) -> float | None:
        """Combined distance of a record to a query.

        Returns:
            Distance in [0, 1), or None when no field is close enough
        """
        processed = default_process(query or "")
        if len(processed) < self.options.min_match_length:
            return None

        total = 1.0
        matched = False
        for field_name, weight in self.weights.items():
            values = field_values(record, field_name)
            if not values:
                continue

            best = max(similarity(processed, default_process(v)) for v in values)
            field_distance = 1 - best / 100
            if field_distance > self.options.threshold:
                continue

            matched = True
            total *= max(field_distance, EPSILON) ** weight

        return total if matched else None

    def score(self, record: UseCase, query: str) -> float:
        """Calculate the fuzzy closeness score of a record."""
        distance = self.distance(record, query)
        if distance is None:
            return 0.0
        return (1 - distance) * 100

    def search(
        self,
        records: Iterable[UseCase],
        query: str,
        filters: FilterSet | None = None,
    ) -> list[ScoredUseCase]:
        """Find records approximately matching a query.

        Matching runs over the whole collection; filters only narrow the
        match set afterwards.

        Returns:
            Scored matches, closest first, ties in collection order
        """
        matches = self.rank(records, query)
        matches = apply_filters(matches, filters)
        return sorted(matches, key=lambda r: r.score, reverse=True)
