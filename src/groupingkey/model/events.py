"""Event data model consumed by the grouping-key processors.

Models are mutable Pydantic objects: processors write ``Error.grouping_key``
in place and the change is visible to whoever holds the batch.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator


class StacktraceFrame(BaseModel):
    """Single stack frame identifying a code location.

    Args:
        module: Module or package name.
        filename: Source file name.
        classname: Enclosing class name.
        function: Function or method name.
        exclude_from_grouping: Skip this frame when computing grouping keys.
    """

    module: Optional[str] = None
    filename: Optional[str] = None
    classname: Optional[str] = None
    function: Optional[str] = None
    exclude_from_grouping: bool = False


class ErrorException(BaseModel):
    """Exception with its stacktrace and ordered "caused by" chain."""

    type: Optional[str] = None
    message: Optional[str] = None
    stacktrace: list[StacktraceFrame] = Field(default_factory=list)
    cause: list[ErrorException] = Field(default_factory=list)

    @field_validator("stacktrace", "cause", mode="before")
    @classmethod
    def none_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    def walk(self) -> list[ErrorException]:
        """Return this exception and every cause in depth-first pre-order."""
        ordered = [self]
        for cause in self.cause:
            ordered.extend(cause.walk())
        return ordered


class ErrorLog(BaseModel):
    """Log record attached to an error when no exception was captured."""

    message: Optional[str] = None
    param_message: Optional[str] = None
    stacktrace: list[StacktraceFrame] = Field(default_factory=list)

    @field_validator("stacktrace", mode="before")
    @classmethod
    def none_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class Error(BaseModel):
    """Error payload of an event.

    ``grouping_key`` is derived from ``exception`` and ``log`` and is
    overwritten every time a key is computed.
    """

    exception: Optional[ErrorException] = None
    log: Optional[ErrorLog] = None
    grouping_key: str = ""


class Event(BaseModel):
    """One record of a batch. Only events carrying an ``error`` are keyed."""

    error: Optional[Error] = None


Batch = list[Event]
