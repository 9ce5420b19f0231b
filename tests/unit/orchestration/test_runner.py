"""Test cases for the orchestration runner."""

from __future__ import annotations

import hashlib
import json
from io import StringIO
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from groupingkey.orchestration.runner import (
    EXIT_INVALID_PAYLOAD,
    EXIT_OK,
    EXIT_PROCESSING_ERROR,
    BatchPayload,
    _error_response,
    main,
    run_batch,
)

# ------------------------------------------------------------------
# BatchPayload
# ------------------------------------------------------------------


class TestBatchPayload:
    def test_valid_minimal(self) -> None:
        p = BatchPayload(events=[{"error": {"log": {"message": "m"}}}])  # type: ignore[list-item]
        assert p.hasher == {}
        assert p.events[0].error is not None

    def test_missing_events_raises(self) -> None:
        with pytest.raises(ValidationError):
            BatchPayload()  # type: ignore[call-arg]

    def test_invalid_frame_raises(self) -> None:
        with pytest.raises(ValidationError):
            BatchPayload(
                events=[  # type: ignore[list-item]
                    {"error": {"log": {"stacktrace": [{"exclude_from_grouping": "maybe"}]}}}
                ]
            )


# ------------------------------------------------------------------
# _error_response
# ------------------------------------------------------------------


class TestErrorResponse:
    def test_structure(self) -> None:
        r = _error_response(1, "bad input")
        assert r == {"status": "error", "code": 1, "message": "bad input"}


# ------------------------------------------------------------------
# run_batch
# ------------------------------------------------------------------


class TestRunBatch:
    def test_identity_keys(self) -> None:
        payload = BatchPayload(
            events=[  # type: ignore[list-item]
                {"error": {"log": {"message": "log_message"}}},
                {},
            ],
            hasher={"algorithm": "identity"},
        )
        result = run_batch(payload)

        assert result["status"] == "ok"
        assert result["event_count"] == 2
        assert result["events"][0]["error"]["grouping_key"] == b"log_message".hex()
        assert result["events"][1] == {}

    def test_md5_keys(self) -> None:
        payload = BatchPayload(
            events=[{"error": {"exception": {"message": "m"}}}],  # type: ignore[list-item]
            hasher={"algorithm": "md5"},
        )
        result = run_batch(payload)
        assert result["events"][0]["error"]["grouping_key"] == hashlib.md5(b"m").hexdigest()

    def test_invalid_hasher_raises(self) -> None:
        payload = BatchPayload(events=[], hasher={"algorithm": "crc32"})
        with pytest.raises(ValidationError):
            run_batch(payload)


# ------------------------------------------------------------------
# main
# ------------------------------------------------------------------


def _run_main(stdin: str) -> tuple[int, dict]:
    stdout = StringIO()
    with patch("sys.stdin", StringIO(stdin)), patch("sys.stdout", stdout):
        with pytest.raises(SystemExit) as exc_info:
            main()
    return exc_info.value.code, json.loads(stdout.getvalue())  # type: ignore[return-value]


class TestMain:
    def test_success(self) -> None:
        payload = {
            "events": [{"error": {"log": {"stacktrace": [{"function": "function"}]}}}],
            "hasher": {"algorithm": "identity"},
        }
        code, out = _run_main(json.dumps(payload))

        assert code == EXIT_OK
        assert out["status"] == "ok"
        assert out["events"][0]["error"]["grouping_key"] == b"function".hex()

    def test_invalid_json(self) -> None:
        code, out = _run_main("{not json")
        assert code == EXIT_INVALID_PAYLOAD
        assert out["status"] == "error"
        assert "Invalid JSON" in out["message"]

    def test_non_object_payload(self) -> None:
        code, out = _run_main("[]")
        assert code == EXIT_INVALID_PAYLOAD
        assert out["code"] == EXIT_INVALID_PAYLOAD

    def test_validation_failure(self) -> None:
        code, out = _run_main(json.dumps({"hasher": {}}))
        assert code == EXIT_INVALID_PAYLOAD
        assert "validation failed" in out["message"]

    def test_processing_error(self) -> None:
        code, out = _run_main(
            json.dumps({"events": [], "hasher": {"algorithm": "crc32"}})
        )
        assert code == EXIT_PROCESSING_ERROR
        assert "Processing error" in out["message"]
