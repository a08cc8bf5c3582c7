# src/taskboard/api/rest.py

"""
REST/HTTP request layer.

| operation | request                                                       |
|-----------|---------------------------------------------------------------|
| create    | POST  /api/tasks        {"completed": false, "text", "uid"}   |
| get_all   | GET   /api/tasks?where[uid][id]=..&orderBy[createdAt]=asc     |
| update    | PATCH /api/tasks/{id}   {"completed": <negated>}              |
| me        | GET   /api/auth/me                                            |
| login     | POST  /api/auth/login   {"username", "password"}              |
| signup    | POST  /api/auth/signup  {"username", "password"}              |
"""

from __future__ import annotations

import logging
from urllib.parse import quote

from ..core.models import Task, User, tasks_from_payload
from ..core.ports import Notifier, TokenStorage
from ..transport.http import JsonHttpClient
from .guard import access_token, guarded

logger = logging.getLogger(__name__)

TASKS_PATH = "/api/tasks"
ME_PATH = "/api/auth/me"
LOGIN_PATH = "/api/auth/login"
SIGNUP_PATH = "/api/auth/signup"


class RestTaskApi:
    def __init__(self, http: JsonHttpClient, notifier: Notifier) -> None:
        self._http = http
        self._notifier = notifier

    def close(self) -> None:
        self._http.close()

    def create(self, text: str, owner_id: str) -> Task | None:
        payload = {"completed": False, "text": text, "uid": {"id": owner_id}}

        def call() -> Task:
            task = Task.from_payload(self._http.post(TASKS_PATH, payload))
            logger.info("Created task id=%s owner=%s", task.id, owner_id)
            return task

        return guarded(self._notifier, "create the task", call, None)

    def get_all(self, owner_id: str) -> list[Task]:
        tasks = self.fetch_all(owner_id)
        return [] if tasks is None else tasks

    def fetch_all(self, owner_id: str) -> list[Task] | None:
        """Like get_all, but None on failure so callers can keep what they have."""
        query = {"where": {"uid": {"id": owner_id}}, "orderBy": {"createdAt": "asc"}}

        def call() -> list[Task]:
            tasks = tasks_from_payload(self._http.get(TASKS_PATH, query=query))
            logger.info("Fetched %d tasks for owner=%s", len(tasks), owner_id)
            return tasks

        return guarded(self._notifier, "load tasks", call, None)

    def update(self, task: Task) -> Task | None:
        # Toggle = invert what we last saw; last write wins on the backend.
        payload = {"completed": not task.completed}
        path = f"{TASKS_PATH}/{quote(task.id, safe='')}"

        def call() -> Task:
            updated = Task.from_payload(self._http.patch(path, payload))
            logger.info("Updated task id=%s completed=%s", updated.id, updated.completed)
            return updated

        return guarded(self._notifier, "update the task", call, None)


class RestSessionApi:
    def __init__(self, http: JsonHttpClient, tokens: TokenStorage, notifier: Notifier) -> None:
        self._http = http
        self._tokens = tokens
        self._notifier = notifier

    def close(self) -> None:
        self._http.close()

    def me(self) -> User | None:
        if not self._tokens.get_token():
            logger.debug("No stored token; skipping identity request.")
            return None
        return guarded(self._notifier, "fetch the current user", lambda: User.from_payload(self._http.get(ME_PATH)), None)

    def login(self, username: str, password: str) -> User | None:
        return self._exchange(LOGIN_PATH, "log in", username, password)

    def signup(self, username: str, password: str) -> User | None:
        return self._exchange(SIGNUP_PATH, "sign up", username, password)

    def _exchange(self, path: str, action: str, username: str, password: str) -> User | None:
        def call() -> str:
            token = access_token(self._http.post(path, {"username": username, "password": password}))
            # A storage failure counts as a failed exchange.
            self._tokens.set_token(token)
            return token

        if guarded(self._notifier, action, call, None) is None:
            return None

        logger.info("Session token stored after %s for username=%s", action, username)
        return self.me()
