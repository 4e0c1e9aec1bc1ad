import json
import logging
from pathlib import Path

import pytest

import simchat.telemetry as telemetry
from simchat.log import JsonlHandler, logger
from simchat.telemetry import REDACTED, log_event, make_json_safe, sanitize

pytestmark = pytest.mark.core


def test_sanitize_redacts_sensitive_keys_recursively() -> None:
    data = {
        "token": "secret",
        "Authorization": "Bearer abc",
        "nested": [{"api_key": "k", "user": "alice"}],
    }
    sanitized = sanitize(data)
    assert sanitized["token"] == REDACTED
    assert sanitized["Authorization"] == REDACTED
    assert sanitized["nested"] == [{"api_key": REDACTED, "user": "alice"}]


def test_make_json_safe_falls_back_to_repr() -> None:
    marker = object()
    assert make_json_safe({"a": (1, marker)}) == {"a": [1, repr(marker)]}


def test_log_event_records_size_and_duration(tmp_path: Path, monkeypatch) -> None:
    log_file = tmp_path / "telemetry.jsonl"
    handler = JsonlHandler(str(log_file))
    logger.addHandler(handler)
    prev_level = logger.level
    logger.setLevel(logging.INFO)
    try:
        monkeypatch.setattr(telemetry.time, "monotonic", lambda: 2.0)
        log_event("TEST_EVENT", {"token": "secret", "foo": "bar"}, start_time=1.0)
    finally:
        logger.setLevel(prev_level)
        logger.removeHandler(handler)
        handler.close()
    entry = json.loads(log_file.read_text().splitlines()[0])
    sanitized_payload = {"token": REDACTED, "foo": "bar"}
    expected_size = len(json.dumps(sanitized_payload, ensure_ascii=False).encode("utf-8"))
    assert entry["event"] == "TEST_EVENT"
    assert entry["payload"] == sanitized_payload
    assert entry["size_bytes"] == expected_size
    assert entry["duration_ms"] == 1000
    assert "timestamp" in entry
