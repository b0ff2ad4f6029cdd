"""CLI commands module."""

from . import search

__all__ = ["search"]
