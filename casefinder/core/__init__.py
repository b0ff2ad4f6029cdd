"""Core record model for the use case catalog."""

from .fields import (
    ALL_LANGUAGES,
    FilterDimension,
    RiskLevel,
)
from .models import (
    FilterSet,
    Metrics,
    ScoredUseCase,
    UseCase,
    has_active_filters,
    normalize_filters,
)

__all__ = [
    "ALL_LANGUAGES",
    "FilterDimension",
    "FilterSet",
    "Metrics",
    "RiskLevel",
    "ScoredUseCase",
    "UseCase",
    "has_active_filters",
    "normalize_filters",
]
