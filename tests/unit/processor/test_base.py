"""Test cases for batch processor composition."""

from unittest.mock import Mock

import pytest

from groupingkey.hashing.accumulators import IdentityAccumulator
from groupingkey.model.events import Error, ErrorLog, Event
from groupingkey.processor.base import BatchProcessor, Chained, ProcessBatchFunc
from groupingkey.processor.grouping import SetGroupingKey


class TestProcessBatchFunc:
    def test_calls_function_with_batch(self) -> None:
        func = Mock()
        batch = [Event()]
        ProcessBatchFunc(func).process_batch(batch)
        func.assert_called_once_with(batch)


class TestChained:
    def test_runs_processors_in_order(self) -> None:
        calls: list[str] = []
        chained = Chained(
            ProcessBatchFunc(lambda batch: calls.append("first")),
            ProcessBatchFunc(lambda batch: calls.append("second")),
        )
        chained.process_batch([])
        assert calls == ["first", "second"]

    def test_stops_at_first_failure(self) -> None:
        second = Mock(spec=BatchProcessor)

        def fail(batch: list[Event]) -> None:
            raise RuntimeError("stage failed")

        chained = Chained(ProcessBatchFunc(fail), second)

        with pytest.raises(RuntimeError, match="stage failed"):
            chained.process_batch([])
        second.process_batch.assert_not_called()

    def test_later_stage_sees_grouping_keys(self) -> None:
        seen: list[str] = []

        def collect(batch: list[Event]) -> None:
            seen.extend(e.error.grouping_key for e in batch if e.error is not None)

        chained = Chained(
            SetGroupingKey(IdentityAccumulator, verbose=False),
            ProcessBatchFunc(collect),
        )
        chained.process_batch([Event(error=Error(log=ErrorLog(message="a")))])
        assert seen == ["61"]

    def test_empty_chain_is_noop(self) -> None:
        batch = [Event()]
        Chained().process_batch(batch)
        assert batch == [Event()]
