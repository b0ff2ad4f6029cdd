"""Pytest configuration and fixtures for CLI tests.

Provides a CLI runner and catalog files written to temporary
directories so commands run against real files.
"""

import json

import pytest
import yaml
from click.testing import CliRunner


@pytest.fixture
def catalog_data():
    """Raw catalog records as they appear in a catalog file."""
    return [
        {
            "id": "code-gen",
            "title": "Code generation",
            "description": "Generate code from natural language",
            "category": "development",
            "subcategory": "authoring",
            "tags": ["code", "generation"],
            "copilot_surface": ["ide", "chat"],
            "mode": ["ask", "agent"],
            "risk_level": "low",
            "languages": ["python", "javascript"],
            "metrics": {"time_saved_min": 30},
        },
        {
            "id": "unit-tests",
            "title": "Unit test writing",
            "description": "Create unit tests for existing code",
            "category": "quality",
            "subcategory": "testing",
            "tags": ["test", "unit"],
            "copilot_surface": ["ide"],
            "mode": ["agent"],
            "risk_level": "medium",
            "languages": ["python"],
            "metrics": {"time_saved_min": 45},
        },
        {
            "id": "docs",
            "title": "Documentation",
            "description": "Write docs",
            "category": "docs",
            "tags": ["docs", "documentation"],
            "copilot_surface": ["chat"],
            "mode": ["ask"],
        },
        {
            "id": "refactor",
            "title": "Refactoring legacy code",
            "description": "Modernize old modules",
            "category": "development",
            "subcategory": "authoring",
            "tags": ["refactor", "code"],
            "copilot_surface": ["ide", "cli"],
            "mode": ["edit"],
            "risk_level": "high",
            "metrics": {"time_saved_min": 60},
        },
    ]


@pytest.fixture
def catalog_file(tmp_path, catalog_data):
    """A JSON catalog file."""
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps(catalog_data))
    return path


@pytest.fixture
def yaml_catalog_file(tmp_path, catalog_data):
    """A YAML catalog file wrapping records in a use_cases key."""
    path = tmp_path / "catalog.yaml"
    path.write_text(yaml.safe_dump({"use_cases": catalog_data}))
    return path


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def run(cli_runner, catalog_file):
    """Invoke the CLI against the JSON catalog."""
    from casefinder.cli.main import cli

    def _run(*args, catalog=catalog_file):
        options = ["--no-color"]
        if catalog is not None:
            options += ["--catalog", str(catalog)]
        return cli_runner.invoke(cli, [*options, *args])

    return _run
