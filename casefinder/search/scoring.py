"""Relevance scoring for use case search.

This module provides the weighted substring scorer used by the default
search mode, along with the common interface shared with the fuzzy
scorer. Scores are additive points; a record scoring zero is not a match.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable

from ..core.models import ScoredUseCase, UseCase
from .config import ExactWeights


def normalize_query(query: str | None) -> str:
    """Lower-case a query and trim surrounding whitespace.

    Only used to decide whether a query is blank; scoring matches the
    lower-cased query as typed, surrounding spaces included.
    """
    if not query:
        return ""
    return query.strip().lower()


class Scorer(ABC):
    """Abstract base class for query scorers."""

    mode: str = "exact"

    @abstractmethod
    def score(self, record: UseCase, query: str) -> float:
        """Calculate the relevance of a record for a query.

        Args:
            record: Record to score
            query: Raw query string

        Returns:
            Score (higher is better, 0 means no match)
        """
        pass

    def rank(self, records: Iterable[UseCase], query: str) -> list[ScoredUseCase]:
        """Score records and keep the matches.

        Args:
            records: Candidate records
            query: Raw query string

        Returns:
            Scored copies of matching records, in input order
        """
        results = []
        for record in records:
            score = self.score(record, query)
            if score > 0:
                results.append(ScoredUseCase.from_use_case(record, score))
        return results


class ExactScorer(Scorer):
    """Weighted case-insensitive substring scorer.

    Whole-query hits on individual fields earn the per-field bonuses in
    ExactWeights. On top of that every (term, field) pair where the field
    contains the term earns ``term_hit`` points, including fields already
    rewarded for the whole query, so records dense in query terms across
    several fields rise to the top.
    """

    mode = "exact"

    def __init__(self, weights: ExactWeights | None = None):
        """Initialize scorer.

        Args:
            weights: Point values for each rule (default: ExactWeights())
        """
        self.weights = weights or ExactWeights()

    def score(self, record: UseCase, query: str) -> float:
        """Calculate the exact-match score of a record."""
        if not normalize_query(query):
            return 0.0
        q = query.lower()

        w = self.weights
        total = 0.0

        if record.title is not None:
            title = record.title.lower()
            if title == q:
                total += w.title_equals
            if q in title:
                total += w.title_contains

        if record.category is not None and q in record.category.lower():
            total += w.category_contains

        if record.description is not None and q in record.description.lower():
            total += w.description_contains

        total += w.tag_contains * sum(1 for tag in record.tags if q in tag.lower())
        total += w.prompt_contains * sum(
            1 for prompt in record.example_prompts if q in prompt.lower()
        )

        fields = self._term_fields(record)
        for term in q.split():
            total += w.term_hit * sum(1 for field in fields if term in field)

        return total

    def _term_fields(self, record: UseCase) -> list[str]:
        """Lower-cased text fields inspected by the per-term pass."""
        fields = [
            record.title,
            record.description,
            record.category,
            record.subcategory,
            *record.tags,
            *record.example_prompts,
        ]
        return [field.lower() for field in fields if field]
