"""Search and ranking engine for a catalog of use cases."""

__version__ = "1.0.0"
