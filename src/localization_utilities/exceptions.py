"""
Exception hierarchy for localization loading and merging.

Every error raised by this package derives from LocalizationError so callers
orchestrating a mod-loading sequence can catch the whole family at once.
"""

from __future__ import annotations

from typing import Any


class LocalizationError(Exception):
    """Base exception for all localization errors.

    Attributes:
        message: Human-readable error message
        details: Optional dictionary of additional error context
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ContentError(LocalizationError):
    """Asset bytes do not contain usable JSON text.

    Non-fatal to a loading loop: the caller should skip the asset.
    """
    pass


class LocalizationParseError(LocalizationError):
    """Malformed JSON, or JSON of the wrong shape, in a payload or table file.

    Attributes:
        source: Path of the offending file, or "<payload>" for in-memory text
    """

    def __init__(self, message: str, source: str, details: dict[str, Any] | None = None):
        super().__init__(message, details)
        self.source = source


class LocalizationValidationError(LocalizationError):
    """A LocalizationSet failed structural validation.

    Attributes:
        problems: Every problem found, one message per entry
    """

    def __init__(self, message: str, problems: list[str], details: dict[str, Any] | None = None):
        super().__init__(message, details)
        self.problems = problems


class ConfigError(LocalizationError):
    """Configuration file could not be read or is invalid."""
    pass
