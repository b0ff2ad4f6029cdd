"""Exception classes for casefinder."""


class CasefinderError(Exception):
    """Base exception for casefinder errors."""

    pass


class CatalogError(CasefinderError):
    """Raised when a catalog cannot be loaded."""

    def __init__(self, source: str, message: str):
        """Initialize with the catalog source and a reason."""
        self.source = source
        super().__init__(f"Cannot load catalog {source}: {message}")


class ConfigError(CasefinderError, ValueError):
    """Raised when configuration values are invalid."""

    pass
