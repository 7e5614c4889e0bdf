"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class DependencyInjectionError(UtilError):
    """Raised when the DI container is misconfigured."""

    pass
