"""Event data model for groupingkey."""

from groupingkey.model.events import (
    Batch,
    Error,
    ErrorException,
    ErrorLog,
    Event,
    StacktraceFrame,
)

__all__ = [
    "Batch",
    "Error",
    "ErrorException",
    "ErrorLog",
    "Event",
    "StacktraceFrame",
]
