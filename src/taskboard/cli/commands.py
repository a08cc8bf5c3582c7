# src/taskboard/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import cast

from ..core import board
from ..core.models import Task
from ..core.state import AppState

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, emit)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def format_task(index: int, task: Task) -> str:
    mark = "x" if task.completed else " "
    return f"{index}. [{mark}] {task.text}"


def format_tasks(state: AppState) -> str:
    if state.user is None:
        return "Not logged in. Use /login <user> <password> or /signup <user> <password>."
    if not state.tasks:
        return "No tasks yet. Type a task (or /add <text>) to create one."
    return "\n".join(format_task(i, t) for i, t in enumerate(state.tasks, start=1))


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_status(state: AppState, args: list[str]) -> str:
    settings = state.settings
    transport = str(getattr(settings, "transport", "http"))
    endpoint = getattr(settings, "graphql_url" if transport == "graphql" else "api_base_url", "")
    user = state.user.id if state.user else "(none)"
    done = sum(1 for t in state.tasks if t.completed)
    return (
        "Status:\n"
        f"  Transport: {transport} ({endpoint})\n"
        f"  User: {user}\n"
        f"  Tasks: {len(state.tasks)} ({done} done)"
    )


def _credentials(args: list[str], usage: str) -> tuple[str, str] | str:
    if len(args) != 2:
        return usage
    return args[0], args[1]


def cmd_login(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    creds = _credentials(args, "Usage: /login <user> <password>")
    if isinstance(creds, str):
        return creds
    if emit:
        emit("Logging in...")
    user = board.login(state, *creds)
    if user is None:
        return "Login failed."
    return f"Logged in as {user.id}.\n{format_tasks(state)}"


def cmd_signup(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    creds = _credentials(args, "Usage: /signup <user> <password>")
    if isinstance(creds, str):
        return creds
    if emit:
        emit("Signing up...")
    user = board.signup(state, *creds)
    if user is None:
        return "Sign-up failed."
    return f"Signed up as {user.id}.\n{format_tasks(state)}"


def cmd_me(state: AppState, args: list[str]) -> str:
    if state.user is None:
        return "Not logged in."
    return f"Logged in as {state.user.id}."


def cmd_list(state: AppState, args: list[str]) -> str:
    return format_tasks(state)


def cmd_refresh(state: AppState, args: list[str]) -> str:
    if state.user is None:
        return format_tasks(state)
    board.refresh_tasks(state)
    return format_tasks(state)


def cmd_add(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /add <text>"
    task = board.add_task(state, " ".join(args))
    if task is None:
        return "Task was not added."
    return f"Added: {format_task(len(state.tasks), task)}"


def cmd_toggle(state: AppState, args: list[str]) -> str:
    """
    /toggle <n>  -> flip completed on task n (numbering from /list)
    """
    if len(args) != 1:
        return "Usage: /toggle <n>"
    try:
        index = int(args[0])
    except ValueError:
        return f"Not a task number: {args[0]}"

    task = board.task_at(state, index)
    if task is None:
        return f"No task #{index}. Use /list to see task numbers."

    updated = board.toggle_completed(state, task)
    if updated is None:
        return "Task was not updated."
    return format_task(index, updated)


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show transport, user and task counts.")
registry.register("login", cmd_login, help_text="Log in: /login <user> <password>.")
registry.register("signup", cmd_signup, help_text="Create an account: /signup <user> <password>.")
registry.register("me", cmd_me, help_text="Show the current user.", aliases=["whoami"])
registry.register("list", cmd_list, help_text="List tasks (oldest first).", aliases=["ls"])
registry.register("refresh", cmd_refresh, help_text="Reload tasks from the server.")
registry.register("add", cmd_add, help_text="Add a task: /add <text> (plain text works too).")
registry.register("toggle", cmd_toggle, help_text="Flip done/not done: /toggle <n>.", aliases=["t"])
