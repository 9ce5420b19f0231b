"""Test cases for the top-level groupingkey API."""

import hashlib

import pytest

import groupingkey
from groupingkey import (
    Error,
    ErrorException,
    ErrorLog,
    Event,
    StacktraceFrame,
    compute_grouping_key,
    set_grouping_keys,
)


class TestExports:
    def test_all_names_resolve(self) -> None:
        for name in groupingkey.__all__:
            assert hasattr(groupingkey, name), name

    def test_version(self) -> None:
        assert isinstance(groupingkey.__version__, str)


class TestComputeGroupingKey:
    def test_identity(self) -> None:
        error = Error(log=ErrorLog(message="connection refused"))
        key = compute_grouping_key(error, algorithm="identity")
        assert key == "636f6e6e656374696f6e2072656675736564"
        assert error.grouping_key == key

    def test_sha256(self) -> None:
        error = Error(
            exception=ErrorException(
                stacktrace=[StacktraceFrame(classname="Repo", function="save")]
            )
        )
        key = compute_grouping_key(error, algorithm="sha256")
        assert key == hashlib.sha256(b"Reposave").hexdigest()


class TestSetGroupingKeys:
    def test_mutates_and_returns_batch(self) -> None:
        batch = [Event(error=Error(log=ErrorLog(message="a"))), Event()]
        result = set_grouping_keys(batch, algorithm="identity")

        assert result is batch
        assert batch[0].error is not None
        assert batch[0].error.grouping_key == "61"

    def test_precedence_holds_across_log_changes(self) -> None:
        exception = ErrorException(
            type="Boom", stacktrace=[StacktraceFrame(module="app.db")]
        )
        batch = [
            Event(error=Error(exception=exception, log=ErrorLog(message="one"))),
            Event(error=Error(exception=exception, log=ErrorLog(message="two"))),
        ]
        set_grouping_keys(batch, algorithm="md5")
        keys = {e.error.grouping_key for e in batch if e.error is not None}
        assert keys == {hashlib.md5(b"app.db").hexdigest()}

    def test_none_batch(self) -> None:
        with pytest.raises(ValueError):
            set_grouping_keys(None, algorithm="identity")  # type: ignore[arg-type]
