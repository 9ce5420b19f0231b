"""Orchestration integration for workflow automation tools.

Provides a JSON-in / JSON-out runner that can be invoked as a subprocess
by pipeline stages written in any language.
"""

from groupingkey.orchestration.runner import (
    EXIT_INVALID_PAYLOAD,
    EXIT_OK,
    EXIT_PROCESSING_ERROR,
    EXIT_SERIALIZATION_ERROR,
    BatchPayload,
    main,
    run_batch,
)

__all__ = [
    "EXIT_INVALID_PAYLOAD",
    "EXIT_OK",
    "EXIT_PROCESSING_ERROR",
    "EXIT_SERIALIZATION_ERROR",
    "BatchPayload",
    "main",
    "run_batch",
]
