# src/taskboard/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .models import Task, User
from .ports import Notifier, SessionApi, TaskApi


@dataclass
class AppState:
    """
    Process-wide application state.

    The task list is only ever what the backend last told us for the current user;
    nothing is persisted locally except the session token.
    """

    settings: Any

    task_api: TaskApi
    session_api: SessionApi
    notifier: Notifier

    user: User | None = None
    tasks: list[Task] = field(default_factory=list)
