"""Ordering of search results.

Sorting is stable and never mutates its input: records that compare
equal keep their relative order, and unknown sort keys return the
records in their original order.
"""

import unicodedata
from collections.abc import Iterable
from enum import Enum
from typing import Any

from ..core.fields import RiskLevel
from ..core.models import UseCase

UNRANKED = 999

RISK_ORDER_ASC = {
    RiskLevel.LOW.value: 1,
    RiskLevel.MEDIUM.value: 2,
    RiskLevel.HIGH.value: 3,
}
RISK_ORDER_DESC = {
    RiskLevel.HIGH.value: 1,
    RiskLevel.MEDIUM.value: 2,
    RiskLevel.LOW.value: 3,
}


class SortKey(str, Enum):
    """Sort order options for search results."""

    RELEVANCE = "relevance"
    TIME_SAVED = "time_saved"
    RISK_ASC = "risk_asc"
    RISK_DESC = "risk_desc"
    CATEGORY = "category"
    TITLE = "title"


def _char_class(char: str) -> int:
    if char.isspace():
        return 0
    if char.isdigit():
        return 2
    if char.isalpha():
        return 3
    return 1


def collation_key(text: str | None) -> tuple:
    """Build a locale-style collation key.

    Characters compare by class first, in the order whitespace,
    punctuation and symbols, digits, letters, and then ignoring accents
    and case within a class. Ties put lower case before upper case for
    the same letter, and finally fall back to the raw string so the
    ordering is total.
    """
    text = text or ""
    decomposed = unicodedata.normalize("NFKD", text)
    base = "".join(c for c in decomposed if not unicodedata.combining(c))
    primary = tuple((_char_class(c), c) for c in base.casefold())
    return (primary, base.swapcase(), text)


def _score(record: Any) -> float:
    return getattr(record, "score", None) or 0


def _time_saved(record: UseCase) -> float:
    return record.time_saved_min or 0


def sort_records(records: Iterable[UseCase], key: str | SortKey | None) -> list:
    """Order records by one of the supported sort keys.

    Args:
        records: Records (plain or scored) to order
        key: Sort key name; unknown names leave the order unchanged

    Returns:
        New list with the records in sorted order
    """
    results = list(records)

    try:
        sort_key = SortKey(key)
    except ValueError:
        return results

    if sort_key == SortKey.RELEVANCE:
        return sorted(results, key=_score, reverse=True)
    elif sort_key == SortKey.TIME_SAVED:
        return sorted(results, key=_time_saved, reverse=True)
    elif sort_key == SortKey.RISK_ASC:
        return sorted(
            results, key=lambda r: RISK_ORDER_ASC.get(r.risk_level, UNRANKED)
        )
    elif sort_key == SortKey.RISK_DESC:
        return sorted(
            results, key=lambda r: RISK_ORDER_DESC.get(r.risk_level, UNRANKED)
        )
    elif sort_key == SortKey.CATEGORY:
        return sorted(results, key=lambda r: collation_key(r.category))
    else:
        return sorted(results, key=lambda r: collation_key(r.title))
