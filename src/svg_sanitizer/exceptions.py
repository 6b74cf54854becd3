# src/svg_sanitizer/exceptions.py
from typing import Iterable


class SanitizerError(Exception):
    """Base class for every error raised by the sanitizer core."""


class ParseFailed(SanitizerError, ValueError):
    """The input could not be parsed into an element tree."""


class InvalidScheme(SanitizerError, ValueError):
    """An unknown color scheme name was requested."""

    def __init__(self, scheme: str, valid: Iterable[str] = ()):
        self.scheme = scheme
        self.valid = list(valid)
        message = f"Invalid color scheme: {scheme}"
        if self.valid:
            message += f" (expected one of: {', '.join(self.valid)})"
        super().__init__(message)


class SourceNotFound(SanitizerError, FileNotFoundError):
    """The designated input document could not be found."""
