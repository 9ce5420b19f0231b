"""Batch processor interface and composition helpers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable

from groupingkey.model.events import Batch


class BatchProcessor(ABC):
    """A pipeline stage that mutates a batch of events in place."""

    @abstractmethod
    def process_batch(self, batch: Batch) -> None:
        """Process every event of *batch*.

        Args:
            batch: Events to process; modified in place.

        Raises:
            ValueError: If the batch itself is unusable (e.g. ``None``).
        """
        ...


class ProcessBatchFunc(BatchProcessor):
    """Adapts a plain callable to the BatchProcessor interface."""

    def __init__(self, func: Callable[[Batch], None]) -> None:
        self.func = func

    def process_batch(self, batch: Batch) -> None:
        self.func(batch)


class Chained(BatchProcessor):
    """Runs processors in order, stopping at the first one that raises."""

    def __init__(self, *processors: BatchProcessor) -> None:
        self.processors = list(processors)

    def process_batch(self, batch: Batch) -> None:
        for processor in self.processors:
            processor.process_batch(batch)
