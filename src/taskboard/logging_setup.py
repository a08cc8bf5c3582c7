# src/taskboard/logging_setup.py

from __future__ import annotations

import logging
import re
import sys
from collections.abc import Iterable
from pathlib import Path

LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Libraries that log every request at INFO.
NOISY_LIBRARIES = ("httpx", "httpcore")

_SECRET_PATTERNS = (
    re.compile(r"(Bearer\s+)[^\s'\",]+", re.IGNORECASE),
    re.compile(r"((?:password|accessToken|token)['\"]?\s*[:=]\s*['\"]?)[^\s'\",}]+", re.IGNORECASE),
)


def redact(text: str) -> str:
    """Mask bearer tokens and credential values in a log line."""
    for pattern in _SECRET_PATTERNS:
        text = pattern.sub(r"\1***", text)
    return text


class SecretRedactingFilter(logging.Filter):
    """Applied to every handler: the session token must never reach a log file."""

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        cleaned = redact(message)
        if cleaned != message:
            record.msg = cleaned
            record.args = None
        return True


class ConsoleFilter(logging.Filter):
    """
    Keep the REPL readable: taskboard logs pass (per-request transport lines only
    at WARNING+), everything else only at ERROR+.
    """

    def __init__(self, app_prefix: str = "taskboard.") -> None:
        super().__init__()
        self._app_prefix = app_prefix
        self._transport_prefix = f"{app_prefix}transport."

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith(self._transport_prefix):
            return record.levelno >= logging.WARNING
        if record.name.startswith(self._app_prefix):
            return True
        return record.levelno >= logging.ERROR


def _handler(handler: logging.Handler, level: int, *filters: logging.Filter) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    for f in filters:
        handler.addFilter(f)
    return handler


def setup_logging(
    *,
    log_dir: str | Path = ".local/taskboard",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    quiet: Iterable[str] = NOISY_LIBRARIES,
) -> Path:
    """
    Install a filtered stderr handler and a full file handler on the root logger.

    Call once, before the first log line. Returns the log file path.
    """
    log_file = Path(log_dir) / "taskboard.log"
    log_file.parent.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for h in list(root.handlers):
        root.removeHandler(h)

    secrets = SecretRedactingFilter()
    root.addHandler(_handler(logging.StreamHandler(sys.stderr), console_level, secrets, ConsoleFilter()))
    root.addHandler(_handler(logging.FileHandler(str(log_file), encoding="utf-8"), file_level, secrets))

    logging.captureWarnings(True)
    for name in quiet:
        logging.getLogger(name).setLevel(logging.WARNING)

    return log_file
