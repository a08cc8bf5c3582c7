# src/taskboard/core/board.py

"""
State reconciliation between the request layer and AppState.

Two states only: no user (empty task list) and a user with their task list.
Failed requests leave state untouched; the request layer already told the user.
"""

from __future__ import annotations

import logging

from .models import Task, User
from .state import AppState

logger = logging.getLogger(__name__)


def install_user(state: AppState, user: User) -> None:
    """Make `user` current, then fetch and install their tasks (in that order)."""
    state.user = user
    state.tasks = list(state.task_api.get_all(user.id))
    logger.info("User %s installed with %d tasks.", user.id, len(state.tasks))


def start(state: AppState) -> User | None:
    """Startup: resume the stored session if the backend still recognizes it."""
    user = state.session_api.me()
    if user is None:
        logger.info("No active session.")
        return None
    install_user(state, user)
    return user


def login(state: AppState, username: str, password: str) -> User | None:
    user = state.session_api.login(username, password)
    if user is not None:
        install_user(state, user)
    return user


def signup(state: AppState, username: str, password: str) -> User | None:
    user = state.session_api.signup(username, password)
    if user is not None:
        install_user(state, user)
    return user


def refresh_tasks(state: AppState) -> list[Task]:
    if state.user is None:
        state.notifier.notify("Log in first.")
        return state.tasks
    tasks = state.task_api.fetch_all(state.user.id)
    if tasks is not None:
        state.tasks = list(tasks)
    return state.tasks


def add_task(state: AppState, text: str) -> Task | None:
    text = text.strip()
    if state.user is None:
        state.notifier.notify("Log in first to add tasks.")
        return None
    if not text:
        state.notifier.notify("Task text is empty.")
        return None

    task = state.task_api.create(text, state.user.id)
    if task is None:
        return None

    # Newest by construction: append without re-sorting.
    state.tasks.append(task)
    return task


def toggle_completed(state: AppState, task: Task) -> Task | None:
    updated = state.task_api.update(task)
    if updated is None:
        return None

    for i, existing in enumerate(state.tasks):
        if existing.id == updated.id:
            state.tasks[i] = updated
            break
    else:
        logger.debug("Toggled task id=%s is not in the local list; list unchanged.", updated.id)
    return updated


def find_task(state: AppState, task_id: str) -> Task | None:
    for task in state.tasks:
        if task.id == task_id:
            return task
    return None


def task_at(state: AppState, index: int) -> Task | None:
    """1-based lookup, as shown by /list."""
    if 1 <= index <= len(state.tasks):
        return state.tasks[index - 1]
    return None
