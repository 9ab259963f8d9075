"""Exceptions raised by the i18n system.

Resolution never raises; only loading and format configuration do.
"""

from typing import Optional


class I18nError(Exception):
    """Base class for all i18n errors."""


class ConfigLoadError(I18nError):
    """A locale source could not be opened, parsed or applied.

    Attributes:
        path: Path of the locale source that failed.
        reason: Underlying diagnostic.
    """

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load locale file {path}: {reason}")


class InvalidFormatsError(I18nError, ValueError):
    """A formats block contains values of the wrong type."""

    def __init__(self, message: str, section: Optional[str] = None):
        self.section = section
        super().__init__(message)
