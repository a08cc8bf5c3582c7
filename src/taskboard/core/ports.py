# src/taskboard/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The board depends on Protocols instead of concrete implementations.
This keeps the REST and GraphQL transports swappable and makes testing easier.
"""

from typing import Protocol

from .models import Task, User


class Notifier(Protocol):
    """User-visible notices (failed requests, missing login, ...)."""
    def notify(self, message: str) -> None: ...


class TokenStorage(Protocol):
    """Single-slot storage for the session bearer token."""
    def get_token(self) -> str | None: ...
    def set_token(self, token: str) -> None: ...
    def clear_token(self) -> None: ...


class TaskApi(Protocol):
    """
    Request layer for tasks. Implementations never raise:
    failures come back as None (create/update/fetch_all) or [] (get_all).
    """

    def create(self, text: str, owner_id: str) -> Task | None: ...
    def get_all(self, owner_id: str) -> list[Task]: ...
    def fetch_all(self, owner_id: str) -> list[Task] | None: ...
    def update(self, task: Task) -> Task | None: ...
    def close(self) -> None: ...


class SessionApi(Protocol):
    def me(self) -> User | None: ...
    def login(self, username: str, password: str) -> User | None: ...
    def signup(self, username: str, password: str) -> User | None: ...
    def close(self) -> None: ...
