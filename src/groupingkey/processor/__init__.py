"""Batch processors for groupingkey."""

from groupingkey.processor.base import BatchProcessor, Chained, ProcessBatchFunc
from groupingkey.processor.grouping import (
    GroupingKeyComputer,
    SetGroupingKey,
    grouping_terms,
)

__all__ = [
    "BatchProcessor",
    "Chained",
    "GroupingKeyComputer",
    "ProcessBatchFunc",
    "SetGroupingKey",
    "grouping_terms",
]
