"""Related use case recommendations.

Relatedness is computed from shared categorical attributes only, with
no query involved. An attribute counts as shared only when both records
actually carry it.
"""

from collections.abc import Iterable

from ..core.models import ScoredUseCase, UseCase
from .config import SimilarityWeights


def _shared(left: Iterable[str] | None, right: Iterable[str] | None) -> int:
    """Count the candidate values (right) also carried by the reference.

    Repeated candidate tags count once per occurrence.
    """
    if left is None or right is None:
        return 0
    reference = set(left)
    return sum(1 for value in right if value in reference)


def _same(left: str | None, right: str | None) -> bool:
    return left is not None and right is not None and left == right


class SimilarityScorer:
    """Pairwise relatedness between records."""

    def __init__(self, weights: SimilarityWeights | None = None):
        self.weights = weights or SimilarityWeights()

    def score(self, record: UseCase, candidate: UseCase) -> float:
        """Score how related a candidate is to a record."""
        w = self.weights
        total = 0.0

        if _same(record.category, candidate.category):
            total += w.same_category
        if record.subcategory and _same(record.subcategory, candidate.subcategory):
            total += w.same_subcategory

        total += w.shared_surface * _shared(
            record.copilot_surface, candidate.copilot_surface
        )
        total += w.shared_mode * _shared(record.mode, candidate.mode)
        total += w.shared_tag * _shared(record.tags, candidate.tags)

        if _same(record.risk_level, candidate.risk_level):
            total += w.same_risk_level

        return total

    def related(
        self, record: UseCase | None, records: Iterable[UseCase], limit: int = 5
    ) -> list[ScoredUseCase]:
        """Find the records most related to a record.

        Args:
            record: Reference record; None yields no results
            records: Collection to draw candidates from
            limit: Maximum number of results; non-positive yields none

        Returns:
            Scored candidates, most related first, ties in collection order
        """
        if record is None or not limit or limit <= 0:
            return []

        scored = []
        for candidate in records:
            if candidate.id == record.id:
                continue
            score = self.score(record, candidate)
            if score > 0:
                scored.append(ScoredUseCase.from_use_case(candidate, score))

        scored.sort(key=lambda r: r.score, reverse=True)
        return scored[:limit]


def related(
    record: UseCase | None,
    records: Iterable[UseCase],
    limit: int = 5,
    weights: SimilarityWeights | None = None,
) -> list[ScoredUseCase]:
    """Find records related to a record using default or given weights."""
    return SimilarityScorer(weights).related(record, records, limit)
