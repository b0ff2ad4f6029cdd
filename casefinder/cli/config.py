"""Configuration management for the CLI."""

import os
from pathlib import Path
from typing import Any

import yaml

from casefinder.exceptions import ConfigError
from casefinder.search.config import SearchConfig


class Config:
    """Configuration management for the CLI application."""

    @staticmethod
    def from_file(path: Path) -> dict[str, Any]:
        """Load configuration from a YAML file."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in config file: {e}") from e
        except OSError as e:
            raise ConfigError(f"Error reading config file: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Config file {path} must contain a mapping")
        return data

    @staticmethod
    def get_config_paths() -> list[Path]:
        """Get the default configuration file paths to check."""
        paths = []

        # User config
        xdg_config_home = Path(
            os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")
        )
        paths.append(xdg_config_home / "casefinder" / "config.yaml")

        # Project config
        paths.append(Path(".casefinder.yaml"))
        paths.append(Path("casefinder.yaml"))

        return paths

    @staticmethod
    def merge_configs(*configs: dict[str, Any]) -> dict[str, Any]:
        """Merge multiple configuration dictionaries."""
        result = {}
        for config in configs:
            result = _deep_merge(result, config)
        return result


def load_config(path: Path | None = None) -> dict[str, Any]:
    """Load configuration from files and environment variables.

    Default locations are merged in precedence order (last one wins for
    conflicting keys); an explicit ``path`` is applied on top of them.
    """
    config: dict[str, Any] = {}

    for default_path in Config.get_config_paths():
        if default_path.exists():
            config = Config.merge_configs(config, Config.from_file(default_path))

    if path is not None:
        config = Config.merge_configs(config, Config.from_file(path))

    # Override with environment variables
    env_overrides: dict[str, Any] = {}
    if catalog := os.environ.get("CASEFINDER_CATALOG"):
        env_overrides["catalog"] = catalog
    if threshold := os.environ.get("CASEFINDER_FUZZY_THRESHOLD"):
        try:
            env_overrides["search"] = {"fuzzy": {"threshold": float(threshold)}}
        except ValueError as e:
            raise ConfigError(
                f"CASEFINDER_FUZZY_THRESHOLD must be a number, got {threshold!r}"
            ) from e

    return Config.merge_configs(config, env_overrides)


def search_config_from(config: dict[str, Any]) -> SearchConfig:
    """Build the search configuration from the ``search`` section."""
    return SearchConfig.from_dict(config.get("search"))


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries."""
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result
