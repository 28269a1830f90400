"""
Chrono Exceptions

Unified exception hierarchy for the date/time helpers.

Usage:
    from chrono.exceptions import ChronoError, ParseError, InvalidArgument
"""
from typing import Optional, Dict, Any


class ChronoError(Exception):
    """
    Base exception for all chrono operations.

    Carries a human readable message plus an optional details dict with the
    offending input, so callers can log or report it without re-parsing.
    """

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        self.message = message
        self.details = details or {}
        self.cause = cause
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message})"


class ParseError(ChronoError, ValueError):
    """Raised when a string cannot be interpreted as a date/time."""
    pass


class InvalidArgument(ChronoError, ValueError):
    """Raised when a well-formed input violates a semantic constraint."""
    pass
