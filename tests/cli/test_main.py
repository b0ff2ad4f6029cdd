"""Tests for main CLI entry point and application setup.

This module tests:
- Version and help display
- Context setup and lazy catalog loading
- Configuration file and environment handling
- Error handling at top level
"""

import pytest
import yaml
from rich.console import Console

from casefinder.cli.config import Config, load_config, search_config_from
from casefinder.cli.main import Context, cli
from casefinder.exceptions import CatalogError, ConfigError
from casefinder.search import SearchEngine


class TestCLIEntryPoint:
    """Test the main CLI entry point."""

    def test_cli_version_flag(self, cli_runner):
        result = cli_runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert "casefinder version 1.0.0" in result.output

    def test_cli_help_flag(self, cli_runner):
        result = cli_runner.invoke(cli, ["--help"])

        assert result.exit_code == 0
        assert "Search a catalog of use cases" in result.output
        for command in ("search", "related", "suggest", "filters"):
            assert command in result.output

    def test_missing_catalog(self, run):
        """Commands needing records fail cleanly without a catalog."""
        result = run("search", "code", catalog=None)

        assert result.exit_code == 1
        assert "no catalog given" in result.output

    def test_unreadable_catalog(self, run, tmp_path):
        result = run("search", "code", catalog=tmp_path / "missing.json")

        assert result.exit_code == 1
        assert "Cannot load catalog" in result.output

    def test_catalog_from_environment(self, run, catalog_file, monkeypatch):
        monkeypatch.setenv("CASEFINDER_CATALOG", str(catalog_file))

        result = run("suggest", "co", catalog=None)

        assert result.exit_code == 0
        assert "Code generation" in result.output

    def test_catalog_from_config_file(self, run, catalog_file, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text(yaml.safe_dump({"catalog": str(catalog_file)}))

        result = run("--config", str(config_file), "suggest", "co", catalog=None)

        assert result.exit_code == 0
        assert "Code generation" in result.output

    def test_invalid_config_file(self, run, tmp_path):
        bad_config = tmp_path / "bad_config.yaml"
        bad_config.write_text("invalid: yaml: content:")

        result = run("--config", str(bad_config), "suggest", "co")

        assert result.exit_code == 1
        assert "Error loading configuration" in result.output

    def test_out_of_range_config(self, run, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text(yaml.safe_dump({"search": {"fuzzy": {"threshold": 5}}}))

        result = run("--config", str(config_file), "suggest", "co")

        assert result.exit_code == 1
        assert "Invalid search configuration" in result.output


class TestContext:
    """Test the shared CLI context."""

    def test_records_loaded_lazily(self, catalog_file):
        context = Context(
            engine=SearchEngine(), console=Console(), catalog_path=catalog_file
        )

        assert context._records is None
        assert len(context.records) == 4
        assert context.records is context.records

    def test_find_record(self, catalog_file):
        context = Context(
            engine=SearchEngine(), console=Console(), catalog_path=catalog_file
        )

        assert context.find_record("docs").title == "Documentation"
        assert context.find_record("nope") is None

    def test_no_catalog(self):
        context = Context(engine=SearchEngine(), console=Console())

        with pytest.raises(CatalogError, match="no catalog given"):
            context.records


class TestConfigLoading:
    """Test configuration files and environment overrides."""

    def test_defaults_empty(self):
        assert load_config() == {}

    def test_user_config(self, tmp_path, monkeypatch):
        user_dir = tmp_path / "xdg" / "casefinder"
        user_dir.mkdir(parents=True)
        (user_dir / "config.yaml").write_text("search:\n  related_limit: 3\n")
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))

        config = load_config()

        assert search_config_from(config).related_limit == 3

    def test_explicit_path_overrides_user_config(self, tmp_path, monkeypatch):
        user_dir = tmp_path / "xdg" / "casefinder"
        user_dir.mkdir(parents=True)
        (user_dir / "config.yaml").write_text(
            "search:\n  related_limit: 3\n  suggestion_limit: 4\n"
        )
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
        explicit = tmp_path / "explicit.yaml"
        explicit.write_text("search:\n  related_limit: 7\n")

        config = search_config_from(load_config(explicit))

        assert config.related_limit == 7
        assert config.suggestion_limit == 4

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("CASEFINDER_CATALOG", "/data/catalog.json")
        monkeypatch.setenv("CASEFINDER_FUZZY_THRESHOLD", "0.25")

        config = load_config()

        assert config["catalog"] == "/data/catalog.json"
        assert search_config_from(config).fuzzy.threshold == 0.25

    def test_invalid_threshold_environment(self, monkeypatch):
        monkeypatch.setenv("CASEFINDER_FUZZY_THRESHOLD", "loose")

        with pytest.raises(ConfigError, match="must be a number"):
            load_config()

    def test_non_mapping_file(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")

        with pytest.raises(ConfigError, match="must contain a mapping"):
            Config.from_file(path)

    def test_merge_configs_is_deep(self):
        merged = Config.merge_configs(
            {"search": {"exact": {"term_hit": 1}, "related_limit": 2}},
            {"search": {"exact": {"title_equals": 9}}},
        )

        assert merged == {
            "search": {"exact": {"term_hit": 1, "title_equals": 9}, "related_limit": 2}
        }
