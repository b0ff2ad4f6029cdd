"""Command-line interface for casefinder.

Built with Click and Rich.
"""

from casefinder.cli.main import cli

__all__ = ["cli"]
