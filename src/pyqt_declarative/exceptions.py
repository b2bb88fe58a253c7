"""Exceptions raised by pyqt-declarative helpers."""


class DeclarativeError(Exception):
    """Base class for errors raised by this package."""


class ThemeTokenError(DeclarativeError, KeyError):
    """Raised when a color context or constant token has no theme value."""


class ConstraintError(DeclarativeError):
    """Raised when constraints reference widgets outside a shared hierarchy."""
