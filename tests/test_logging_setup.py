# tests/test_logging_setup.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from taskboard.logging_setup import ConsoleFilter, SecretRedactingFilter, redact, setup_logging


def _record(name: str, level: int, msg: str, *args) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, msg, args, None)


def test_redact_masks_bearer_and_credentials() -> None:
    line = redact('Authorization: Bearer abc.def-123 body={"username": "alice", "password": "secret"}')
    assert "abc.def-123" not in line
    assert "secret" not in line
    assert "Bearer ***" in line
    assert "alice" in line


def test_redacting_filter_rewrites_formatted_message() -> None:
    record = _record("taskboard.api.rest", logging.INFO, "stored %s", "accessToken=tok-u1")
    assert SecretRedactingFilter().filter(record) is True
    assert record.getMessage() == "stored accessToken=***"


@pytest.mark.parametrize(
    ("name", "level", "shown"),
    [
        ("taskboard.core.board", logging.INFO, True),
        ("taskboard.transport.http", logging.INFO, False),
        ("taskboard.transport.http", logging.WARNING, True),
        ("httpx", logging.INFO, False),
        ("httpx", logging.ERROR, True),
        ("py.warnings", logging.WARNING, False),
    ],
)
def test_console_filter(name: str, level: int, shown: bool) -> None:
    assert ConsoleFilter().filter(_record(name, level, "x")) is shown


def test_setup_logging_writes_redacted_file(tmp_path: Path) -> None:
    root = logging.getLogger()
    saved = list(root.handlers), root.level
    try:
        log_file = setup_logging(log_dir=tmp_path / "logs", console_level=logging.CRITICAL)
        logging.getLogger("taskboard.test").info("header Bearer tok-123")
        for h in root.handlers:
            h.flush()
        text = log_file.read_text("utf-8")
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
            h.close()
        for h in saved[0]:
            root.addHandler(h)
        root.setLevel(saved[1])
        logging.captureWarnings(False)

    assert log_file == tmp_path / "logs" / "taskboard.log"
    assert "Bearer ***" in text
    assert "tok-123" not in text
