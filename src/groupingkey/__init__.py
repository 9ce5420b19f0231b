from typing import Optional

from groupingkey._version import __version__
from groupingkey.hashing.config import load_config
from groupingkey.hashing.factory import create_hasher_factory
from groupingkey.model.events import (
    Batch,
    Error,
    ErrorException,
    ErrorLog,
    Event,
    StacktraceFrame,
)
from groupingkey.processor.grouping import (
    GroupingKeyComputer,
    SetGroupingKey,
    grouping_terms,
)

__all__ = [
    "__version__",
    "Batch",
    "Error",
    "ErrorException",
    "ErrorLog",
    "Event",
    "GroupingKeyComputer",
    "SetGroupingKey",
    "StacktraceFrame",
    "compute_grouping_key",
    "grouping_terms",
    "set_grouping_keys",
]


def compute_grouping_key(error: Error, algorithm: Optional[str] = None) -> str:
    """Compute and store the grouping key of a single error.

    Example::

        from groupingkey import Error, ErrorLog, compute_grouping_key

        error = Error(log=ErrorLog(message="connection refused"))
        compute_grouping_key(error, algorithm="identity")
        # '636f6e6e656374696f6e2072656675736564'

    Args:
        error: Error payload; ``error.grouping_key`` is overwritten.
        algorithm: Checksum algorithm override (see :class:`HasherConfig`).

    Returns:
        Hex-encoded grouping key.
    """
    config = load_config(algorithm=algorithm)
    return GroupingKeyComputer(create_hasher_factory(config)).compute(error)


def set_grouping_keys(batch: Batch, algorithm: Optional[str] = None) -> Batch:
    """Set the grouping key on every error event of *batch* in place.

    Args:
        batch: Events to key.
        algorithm: Checksum algorithm override (see :class:`HasherConfig`).

    Returns:
        The same batch object, for chaining.

    Raises:
        ValueError: If *batch* is ``None`` or the algorithm is unsupported.
    """
    config = load_config(algorithm=algorithm)
    processor = SetGroupingKey(create_hasher_factory(config), verbose=config.verbose)
    processor.process_batch(batch)
    return batch
