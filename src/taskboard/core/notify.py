# src/taskboard/core/notify.py

from __future__ import annotations

import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)


class LoggingNotifier:
    """Fallback notifier when no user-facing surface is wired: notices go to the log."""

    def notify(self, message: str) -> None:
        logger.warning("NOTICE: %s", message)


class CallbackNotifier:
    """Forward notices to a callable (the console passes its printer)."""

    def __init__(self, emit: Callable[[str], None]) -> None:
        self._emit = emit

    def notify(self, message: str) -> None:
        logger.debug("Notice: %s", message)
        self._emit(message)
