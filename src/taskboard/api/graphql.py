# src/taskboard/api/graphql.py

"""
GraphQL request layer: the same operations as api/rest.py, one named operation each.

Input shapes follow Keystone-style generated inputs
(relationship `connect`, `equals` filters, list-of-objects orderBy).
"""

from __future__ import annotations

import logging
from dataclasses import replace

from ..core.models import Task, User, tasks_from_payload
from ..core.ports import Notifier, TokenStorage
from ..transport.graphql import GraphQLClient
from .guard import access_token, guarded, response_field

logger = logging.getLogger(__name__)

TASK_FIELDS = "id text completed createdAt"

CREATE_TASK = f"""
mutation CreateTask($data: TaskCreateInput!) {{
  createTask(data: $data) {{ {TASK_FIELDS} }}
}}
"""

GET_TASKS = f"""
query GetTasks($where: TaskWhereInput, $orderBy: [TaskOrderByInput!]) {{
  tasks(where: $where, orderBy: $orderBy) {{ {TASK_FIELDS} }}
}}
"""

UPDATE_TASK = f"""
mutation UpdateTask($data: TaskUpdateInput!, $where: TaskWhereUniqueInput!) {{
  updateTask(data: $data, where: $where) {{ {TASK_FIELDS} }}
}}
"""

ME = """
query Me {
  me { id }
}
"""

LOGIN = """
mutation Login($credentials: Credentials!) {
  login(credentials: $credentials) { accessToken }
}
"""

SIGNUP = """
mutation Signup($credentials: Credentials!) {
  signup(credentials: $credentials) { accessToken }
}
"""


class GraphQLTaskApi:
    def __init__(self, client: GraphQLClient, notifier: Notifier) -> None:
        self._client = client
        self._notifier = notifier

    def close(self) -> None:
        self._client.close()

    def create(self, text: str, owner_id: str) -> Task | None:
        variables = {
            "data": {"completed": False, "text": text, "uid": {"connect": {"id": owner_id}}},
        }

        def call() -> Task:
            data = self._client.execute(CREATE_TASK, variables, operation_name="CreateTask")
            task = Task.from_payload(response_field(data, "createTask"))
            logger.info("Created task id=%s owner=%s", task.id, owner_id)
            # The selection does not include the owner; we know it.
            return _with_owner(task, owner_id)

        return guarded(self._notifier, "create the task", call, None)

    def get_all(self, owner_id: str) -> list[Task]:
        tasks = self.fetch_all(owner_id)
        return [] if tasks is None else tasks

    def fetch_all(self, owner_id: str) -> list[Task] | None:
        variables = {
            "where": {"uid": {"id": {"equals": owner_id}}},
            "orderBy": [{"createdAt": "asc"}],
        }

        def call() -> list[Task]:
            data = self._client.execute(GET_TASKS, variables, operation_name="GetTasks")
            tasks = [_with_owner(t, owner_id) for t in tasks_from_payload(response_field(data, "tasks"))]
            logger.info("Fetched %d tasks for owner=%s", len(tasks), owner_id)
            return tasks

        return guarded(self._notifier, "load tasks", call, None)

    def update(self, task: Task) -> Task | None:
        variables = {
            "data": {"completed": not task.completed},
            "where": {"id": task.id},
        }

        def call() -> Task:
            data = self._client.execute(UPDATE_TASK, variables, operation_name="UpdateTask")
            updated = Task.from_payload(response_field(data, "updateTask"))
            logger.info("Updated task id=%s completed=%s", updated.id, updated.completed)
            return _with_owner(updated, task.owner_id)

        return guarded(self._notifier, "update the task", call, None)


def _with_owner(task: Task, owner_id: str | None) -> Task:
    if task.owner_id or owner_id is None:
        return task
    return replace(task, owner_id=owner_id)


class GraphQLSessionApi:
    def __init__(self, client: GraphQLClient, tokens: TokenStorage, notifier: Notifier) -> None:
        self._client = client
        self._tokens = tokens
        self._notifier = notifier

    def close(self) -> None:
        self._client.close()

    def me(self) -> User | None:
        if not self._tokens.get_token():
            logger.debug("No stored token; skipping identity request.")
            return None

        def call() -> User:
            data = self._client.execute(ME, operation_name="Me")
            return User.from_payload(response_field(data, "me"))

        return guarded(self._notifier, "fetch the current user", call, None)

    def login(self, username: str, password: str) -> User | None:
        return self._exchange(LOGIN, "Login", "login", "log in", username, password)

    def signup(self, username: str, password: str) -> User | None:
        return self._exchange(SIGNUP, "Signup", "signup", "sign up", username, password)

    def _exchange(
        self,
        document: str,
        operation_name: str,
        root_field: str,
        action: str,
        username: str,
        password: str,
    ) -> User | None:
        variables = {"credentials": {"username": username, "password": password}}

        def call() -> str:
            data = self._client.execute(document, variables, operation_name=operation_name)
            token = access_token(response_field(data, root_field))
            self._tokens.set_token(token)
            return token

        if guarded(self._notifier, action, call, None) is None:
            return None

        logger.info("Session token stored after %s for username=%s", action, username)
        return self.me()
