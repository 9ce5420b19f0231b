"""Grouping-key computation for error events.

A grouping key clusters independently reported occurrences of the same
error. It is the digest of an ordered sequence of *grouping terms* taken
from the error:

1. Exception present, with at least one frame anywhere in its cause chain:
   frame terms for the root exception, then each cause depth-first.
2. Exception present without frames: exception types depth-first, the log
   ``param_message`` (only alongside a type), then exception messages
   depth-first.
3. No exception: frame terms of the log stacktrace, or else the log message.
   A log carrying only ``param_message`` yields no terms; ``param_message``
   is used solely to qualify exception types in rule 2.

Terms are written to the accumulator back to back with no separator, so the
key is a one-way fingerprint and term boundaries cannot be recovered.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from groupingkey.hashing.config import load_config
from groupingkey.hashing.factory import HashFactory, create_hasher_factory
from groupingkey.model.events import Batch, Error, ErrorException, StacktraceFrame
from groupingkey.processor.base import BatchProcessor
from groupingkey.utils.logging import configure_module_logger

logger = configure_module_logger(__name__, level=logging.INFO)


def _frame_terms(frame: StacktraceFrame) -> list[str]:
    # Module identifies the frame on its own; file or class identity is
    # qualified by the function name.
    if frame.module:
        return [frame.module]
    location = frame.filename or frame.classname
    if location:
        return [location, frame.function] if frame.function else [location]
    return [frame.function] if frame.function else []


def _stacktrace_terms(frames: Iterable[StacktraceFrame]) -> list[str]:
    terms: list[str] = []
    for frame in frames:
        if frame.exclude_from_grouping:
            continue
        terms.extend(_frame_terms(frame))
    return terms


def _exception_terms(error: Error, exception: ErrorException) -> list[str]:
    chain = exception.walk()

    # Any frame, excluded or not, selects the stacktrace path.
    if any(exc.stacktrace for exc in chain):
        terms: list[str] = []
        for exc in chain:
            terms.extend(_stacktrace_terms(exc.stacktrace))
        return terms

    terms = [exc.type for exc in chain if exc.type]
    if terms and error.log is not None and error.log.param_message:
        terms.append(error.log.param_message)
    terms.extend(exc.message for exc in chain if exc.message)
    return terms


def grouping_terms(error: Optional[Error]) -> list[str]:
    """Select the ordered grouping terms for *error*.

    Missing exceptions, logs, frames or fields contribute nothing; they never
    raise.

    Args:
        error: Error payload of an event.

    Returns:
        Non-empty strings in the order they are hashed. Empty when the error
        carries no identifying data.
    """
    if error is None:
        return []

    if error.exception is not None:
        return _exception_terms(error, error.exception)

    if error.log is not None:
        if error.log.stacktrace:
            return _stacktrace_terms(error.log.stacktrace)
        if error.log.message:
            return [error.log.message]

    return []


class GroupingKeyComputer:
    """Derives grouping keys using a pluggable checksum accumulator.

    Args:
        new_hash: Zero-argument factory returning a fresh accumulator. Defaults
            to the algorithm selected by :func:`load_config`.
    """

    def __init__(self, new_hash: Optional[HashFactory] = None) -> None:
        if new_hash is None:
            new_hash = create_hasher_factory(load_config())
        self.new_hash = new_hash

    def grouping_terms(self, error: Optional[Error]) -> list[str]:
        return grouping_terms(error)

    def compute(self, error: Error) -> str:
        """Compute the grouping key and store it on ``error.grouping_key``.

        Args:
            error: Error payload to key; mutated in place.

        Returns:
            Lower-case hex digest. With no terms this is the digest of zero
            bytes, which is the empty string for the identity accumulator.
        """
        accumulator = self.new_hash()
        for term in self.grouping_terms(error):
            accumulator.write(term.encode("utf-8"))
        key = accumulator.finalize().hex()
        error.grouping_key = key
        return key


class SetGroupingKey(BatchProcessor):
    """Batch processor that sets ``grouping_key`` on every error event.

    Events without an ``error`` are left untouched.

    Args:
        new_hash: Accumulator factory; defaults to the configured algorithm.
        verbose: Log per-event keys at DEBUG. Defaults to the configured value.
    """

    def __init__(
        self,
        new_hash: Optional[HashFactory] = None,
        verbose: Optional[bool] = None,
    ) -> None:
        if new_hash is None or verbose is None:
            config = load_config()
            if new_hash is None:
                new_hash = create_hasher_factory(config)
            if verbose is None:
                verbose = config.verbose
        self.computer = GroupingKeyComputer(new_hash)
        self.verbose = verbose
        logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    def process_batch(self, batch: Batch) -> None:
        if batch is None:
            raise ValueError("batch must not be None")

        keyed = 0
        for index, event in enumerate(batch):
            if event.error is None:
                continue
            key = self.computer.compute(event.error)
            keyed += 1
            if self.verbose:
                logger.debug(f"event {index}: grouping key {key or '<empty>'}")

        logger.debug(f"Set grouping key on {keyed}/{len(batch)} events in batch")
