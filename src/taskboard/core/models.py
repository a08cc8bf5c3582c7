# src/taskboard/core/models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

from ..errors import MalformedResponseError


def _parse_timestamp(raw: Any) -> datetime:
    if isinstance(raw, datetime):
        dt = raw
    elif isinstance(raw, str) and raw.strip():
        try:
            dt = datetime.fromisoformat(raw.strip())
        except ValueError as e:
            raise MalformedResponseError(f"Bad createdAt timestamp: {raw!r}") from e
    else:
        raise MalformedResponseError(f"Missing createdAt timestamp: {raw!r}")

    # Backends that omit the offset mean UTC.
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt


def _owner_from_payload(data: dict[str, Any]) -> str | None:
    uid = data.get("uid")
    if isinstance(uid, dict) and uid.get("id") is not None:
        return str(uid["id"])
    owner = data.get("ownerId")
    return None if owner is None else str(owner)


@dataclass(frozen=True, slots=True)
class User:
    id: str

    @classmethod
    def from_payload(cls, data: Any) -> User:
        if not isinstance(data, dict) or data.get("id") in (None, ""):
            raise MalformedResponseError(f"Bad user payload: {data!r}")
        return cls(id=str(data["id"]))


@dataclass(frozen=True, slots=True)
class Task:
    """
    A to-do entry as the backend knows it.

    `id` and `created_at` are assigned by the backend; `created_at` is only used for ordering.
    `owner_id` is None when the backend does not echo it back (the GraphQL selection omits it).
    """

    id: str
    text: str
    completed: bool
    created_at: datetime
    owner_id: str | None = None

    @classmethod
    def from_payload(cls, data: Any) -> Task:
        if not isinstance(data, dict):
            raise MalformedResponseError(f"Bad task payload: {data!r}")

        task_id = data.get("id")
        text = data.get("text")
        completed = data.get("completed")

        if task_id in (None, ""):
            raise MalformedResponseError("Task payload has no id.")
        if not isinstance(text, str):
            raise MalformedResponseError(f"Task {task_id} has no text.")
        if not isinstance(completed, bool):
            raise MalformedResponseError(f"Task {task_id} has non-boolean completed: {completed!r}")

        return cls(
            id=str(task_id),
            text=text,
            completed=completed,
            created_at=_parse_timestamp(data.get("createdAt")),
            owner_id=_owner_from_payload(data),
        )


def tasks_from_payload(data: Any) -> list[Task]:
    """Parse a list payload and order it by creation time (oldest first, stable)."""
    if not isinstance(data, list):
        raise MalformedResponseError(f"Expected a list of tasks, got {type(data).__name__}.")
    tasks = [Task.from_payload(item) for item in data]
    tasks.sort(key=lambda t: t.created_at)
    return tasks
