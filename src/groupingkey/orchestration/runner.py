"""Stdin/stdout runner for keying event batches from other tools.

This module provides a lightweight execution script that:

1. Reads a JSON payload from **stdin**.
2. Validates it against :class:`BatchPayload`.
3. Builds the checksum accumulator via :func:`load_config`.
4. Sets the grouping key on every error event.
5. Writes the keyed events as JSON to **stdout**.

Exit codes are deterministic so that callers can branch on them.

Usage::

    echo '{"events": [{"error": {"log": {"message": "boom"}}}]}' \\
        | python -m groupingkey.orchestration.runner
"""

from __future__ import annotations

import json
import sys
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from groupingkey.hashing.config import load_config
from groupingkey.hashing.factory import create_hasher_factory
from groupingkey.model.events import Event
from groupingkey.processor.grouping import SetGroupingKey

EXIT_OK: int = 0
EXIT_INVALID_PAYLOAD: int = 1
EXIT_PROCESSING_ERROR: int = 2
EXIT_SERIALIZATION_ERROR: int = 3


class BatchPayload(BaseModel):
    """Schema for the incoming JSON payload.

    Attributes:
        events: Events to key, in order.
        hasher: Key-value overrides passed to :func:`load_config`.
    """

    events: list[Event]
    hasher: dict[str, Any] = Field(default_factory=dict)


def run_batch(payload: BatchPayload) -> dict[str, Any]:
    """Set grouping keys for a validated payload.

    Args:
        payload: Validated batch payload.

    Returns:
        Dictionary with ``status``, ``events`` (list of event dicts), and
        ``event_count``.

    Raises:
        ValidationError: If the hasher overrides are invalid.
        ValueError: If the configured algorithm is unavailable.
    """
    config = load_config(**payload.hasher)
    processor = SetGroupingKey(create_hasher_factory(config), verbose=config.verbose)

    batch = payload.events
    processor.process_batch(batch)

    events: list[dict[str, Any]] = [
        event.model_dump(exclude_none=True) for event in batch
    ]

    return {
        "status": "ok",
        "events": events,
        "event_count": len(events),
    }


def _error_response(code: int, message: str) -> dict[str, Any]:
    """Build a structured error response dict.

    Args:
        code: Exit code constant.
        message: Human-readable error description.

    Returns:
        Error dict with ``status``, ``code``, and ``message``.
    """
    return {"status": "error", "code": code, "message": message}


def _fail(code: int, message: str) -> None:
    sys.stdout.write(json.dumps(_error_response(code, message)))
    sys.exit(code)


def main() -> None:
    """Entry point: read stdin -> set grouping keys -> write stdout."""
    try:
        raw = sys.stdin.read()
    except OSError as exc:
        _fail(EXIT_INVALID_PAYLOAD, f"stdin read error: {exc}")
        return

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        _fail(EXIT_INVALID_PAYLOAD, f"Invalid JSON: {exc}")
        return

    if not isinstance(data, dict):
        _fail(EXIT_INVALID_PAYLOAD, "Payload must be a JSON object")
        return

    try:
        payload = BatchPayload(**data)
    except ValidationError as exc:
        _fail(EXIT_INVALID_PAYLOAD, f"Payload validation failed: {exc}")
        return

    try:
        output = run_batch(payload)
    except (ValidationError, ValueError) as exc:
        _fail(EXIT_PROCESSING_ERROR, f"Processing error: {exc}")
        return

    try:
        sys.stdout.write(json.dumps(output))
    except (TypeError, ValueError) as exc:
        _fail(EXIT_SERIALIZATION_ERROR, f"Serialization error: {exc}")
        return

    sys.exit(EXIT_OK)


if __name__ == "__main__":
    main()
