import logging
from pathlib import Path

import pytest

import simchat.log as log_module
from simchat.log import ConsoleFormatter, configure_logging, get_log_directory

pytestmark = pytest.mark.core


@pytest.fixture
def clean_logger(monkeypatch):
    original_handlers = list(log_module.logger.handlers)
    original_level = log_module.logger.level
    log_module.logger.handlers.clear()
    monkeypatch.setattr(log_module, "_log_dir", None)
    yield log_module.logger
    for handler in log_module.logger.handlers:
        handler.close()
    log_module.logger.handlers[:] = original_handlers
    log_module.logger.setLevel(original_level)


def test_configure_logging_creates_text_and_jsonl_logs(tmp_path: Path, clean_logger) -> None:
    log_dir = configure_logging(log_dir=tmp_path / "logs")
    assert log_dir == (tmp_path / "logs").resolve()
    assert get_log_directory() == log_dir
    clean_logger.info("hello from test")
    for handler in clean_logger.handlers:
        handler.flush()
    assert "hello from test" in (log_dir / "simchat.log").read_text()
    assert "hello from test" in (log_dir / "simchat.jsonl").read_text()


def test_configure_logging_is_idempotent(tmp_path: Path, clean_logger) -> None:
    configure_logging(log_dir=tmp_path)
    count = len(clean_logger.handlers)
    configure_logging(log_dir=tmp_path / "other")
    assert len(clean_logger.handlers) == count


def test_log_dir_env_override(tmp_path: Path, clean_logger, monkeypatch) -> None:
    monkeypatch.setenv("SIMCHAT_LOG_DIR", str(tmp_path / "env-logs"))
    assert configure_logging() == (tmp_path / "env-logs").resolve()


def test_console_formatter_appends_event_payload() -> None:
    record = logging.LogRecord("simchat", logging.INFO, __file__, 1, "EVT", (), None)
    record.json = {"event": "EVT", "payload": {"a": 1}}
    assert ConsoleFormatter().format(record) == 'INFO: EVT {"a": 1}'
    plain = logging.LogRecord("simchat", logging.INFO, __file__, 1, "plain", (), None)
    assert ConsoleFormatter().format(plain) == "INFO: plain"
