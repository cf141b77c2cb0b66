"""
Custom exceptions for the scheduling engine.
"""

from typing import Any, Optional


class AgendaError(Exception):
    """Base exception for agenda_engine."""

    def __init__(self, message: str, details: Optional[Any] = None):
        self.message = message
        self.details = details
        super().__init__(message)


class InvalidIntervalError(AgendaError, ValueError):
    """Interval with a non-positive duration."""

    pass


class NotFoundError(AgendaError):
    """Entity not found in the supplied collection."""

    pass
