"""Pytest configuration and shared fixtures."""

import os

import pytest

from casefinder.core.models import Metrics, UseCase


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch, tmp_path_factory):
    """Isolate environment variables for each test.

    This prevents test pollution where one test's environment
    changes affect other tests, and keeps user configuration files
    out of reach.
    """
    original_env = os.environ.copy()
    monkeypatch.setenv(
        "XDG_CONFIG_HOME", str(tmp_path_factory.mktemp("xdg_config_home"))
    )
    monkeypatch.delenv("CASEFINDER_CATALOG", raising=False)
    monkeypatch.delenv("CASEFINDER_FUZZY_THRESHOLD", raising=False)

    yield

    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def example_use_cases() -> list[UseCase]:
    """The three-record catalog used in the reference walkthrough."""
    return [
        UseCase(
            id="1",
            title="Code generation",
            category="development",
            tags=("code", "generation"),
            description="Generate code",
        ),
        UseCase(
            id="2",
            title="Testing",
            category="quality",
            tags=("test", "unit"),
            description="Create tests",
        ),
        UseCase(
            id="3",
            title="Documentation",
            category="docs",
            tags=("docs", "documentation"),
            description="Write docs",
        ),
    ]


@pytest.fixture
def catalog_use_cases() -> list[UseCase]:
    """A catalog exercising every record attribute."""
    return [
        UseCase(
            id="code-gen",
            title="Code generation",
            description="Generate code from natural language",
            category="development",
            subcategory="authoring",
            tags=("code", "generation"),
            example_prompts=("Write a function to parse CSV",),
            copilot_surface=frozenset({"ide", "chat"}),
            mode=frozenset({"ask", "agent"}),
            risk_level="low",
            languages=frozenset({"python", "javascript"}),
            metrics=Metrics(time_saved_min=30),
        ),
        UseCase(
            id="unit-tests",
            title="Unit test writing",
            description="Create unit tests for existing code",
            category="quality",
            subcategory="testing",
            tags=("test", "unit"),
            example_prompts=("Generate unit tests for this function",),
            copilot_surface=frozenset({"ide"}),
            mode=frozenset({"agent"}),
            risk_level="medium",
            languages=frozenset({"python"}),
            metrics=Metrics(time_saved_min=45),
        ),
        UseCase(
            id="docs",
            title="Documentation",
            description="Write docs",
            category="docs",
            tags=("docs", "documentation"),
            example_prompts=("Write README for project",),
            copilot_surface=frozenset({"chat"}),
            mode=frozenset({"ask"}),
        ),
        UseCase(
            id="refactor",
            title="Refactoring legacy code",
            description="Modernize old modules",
            category="development",
            subcategory="authoring",
            tags=("refactor", "code"),
            copilot_surface=frozenset({"ide", "cli"}),
            mode=frozenset({"edit"}),
            risk_level="high",
            languages=frozenset(),
            metrics=Metrics(time_saved_min=60),
        ),
        UseCase(
            id="pr-review",
            title="Pull request review",
            description="Summarize changes",
            category="collaboration",
            tags=("review",),
            copilot_surface=frozenset({"github.com"}),
            mode=frozenset({"ask"}),
            risk_level="low",
            metrics=Metrics(time_saved_min=15),
        ),
    ]
