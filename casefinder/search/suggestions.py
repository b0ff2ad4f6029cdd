"""Autocomplete suggestions harvested from the catalog."""

from collections.abc import Iterable

from ..core.models import UseCase

MIN_PARTIAL_LENGTH = 2


def suggest(
    records: Iterable[UseCase], partial: str | None, limit: int = 10
) -> list[str]:
    """Suggest completions for a partially typed query.

    Titles, categories and tags containing the partial text are collected
    in the order they are encountered, without ranking. Duplicates are
    dropped by exact string equality.

    Args:
        records: Records to harvest from, in collection order
        partial: Text typed so far
        limit: Maximum number of suggestions

    Returns:
        Up to ``limit`` distinct suggestions
    """
    if not partial or len(partial) < MIN_PARTIAL_LENGTH or limit <= 0:
        return []

    needle = partial.lower()
    suggestions: dict[str, None] = {}

    for record in records:
        candidates = [record.title, record.category, *record.tags]
        for candidate in candidates:
            if candidate is None or candidate in suggestions:
                continue
            if needle in candidate.lower():
                suggestions[candidate] = None
                if len(suggestions) >= limit:
                    return list(suggestions)

    return list(suggestions)
