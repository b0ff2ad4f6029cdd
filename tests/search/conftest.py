"""Shared fixtures for search module tests."""

import pytest

from casefinder.search import SearchEngine


@pytest.fixture
def engine() -> SearchEngine:
    """A search engine with default configuration and an empty cache."""
    return SearchEngine()
