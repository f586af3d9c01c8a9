"""Errors raised while loading and printing route maps."""

from typing import Optional


class RouteMapError(Exception):

    """Base class for all routemap errors.

    The source is the name of the input (usually a file path) and line is the
    1-based line number where the problem was detected, when known.
    """

    def __init__(
        self, message: str, source: Optional[str] = None, line: Optional[int] = None
    ):
        super().__init__(message)
        self.message = message
        self.source = source
        self.line = line

    def __str__(self) -> str:
        if self.source is not None and self.line is not None:
            return f"{self.source}:{self.line}: {self.message}"
        if self.source is not None:
            return f"{self.source}: {self.message}"
        if self.line is not None:
            return f"line {self.line}: {self.message}"
        return self.message


class InvalidArgument(RouteMapError, ValueError):
    """An argument is out of its allowed range."""


class MalformedInput(RouteMapError, ValueError):
    """Input text does not have the expected form."""


class UnexpectedEndOfInput(RouteMapError, EOFError):
    """Input ended in the middle of a record."""


class ResourceUnavailable(RouteMapError, OSError):
    """The input could not be opened or read."""
