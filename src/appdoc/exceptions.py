"""Exception hierarchy for appdoc."""

from __future__ import annotations


class AppDocError(Exception):
    """Base exception for all appdoc errors."""


class ConfigurationError(AppDocError):
    """Raised when the generator or its settings are misconfigured."""


class MissingDependencyError(ConfigurationError):
    """A required collaborator was not supplied at construction time."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Required dependency {name!r} is missing")
        self.name = name


class MalformedInputError(AppDocError, ValueError):
    """Raised when a caller passes an unparseable identifier or empty base URI."""


class DataIntegrityError(AppDocError):
    """Raised when the record store violates the one-record-per-id invariant."""


class RecordFormatError(AppDocError):
    """Stored record could not be parsed into an ``Application``."""

    def __init__(self, message: str, source: str = "") -> None:
        super().__init__(message)
        self.source = source


class TemplateNotFoundError(AppDocError):
    """Raised when a template address cannot be loaded."""


class DocumentConversionError(AppDocError):
    """Raised when rendered markup cannot be converted to a PDF."""


__all__ = [
    "AppDocError",
    "ConfigurationError",
    "MissingDependencyError",
    "MalformedInputError",
    "DataIntegrityError",
    "RecordFormatError",
    "TemplateNotFoundError",
    "DocumentConversionError",
]
