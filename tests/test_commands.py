# tests/test_commands.py

from __future__ import annotations

from taskboard.cli.commands import CommandRegistry, registry
from taskboard.core.state import AppState

from .fakes import FakeBackend


def test_command_registry_routes_2_and_3_params(state: AppState) -> None:
    reg = CommandRegistry()
    called = {"h2": 0, "h3": 0}

    def h2(state, args):
        called["h2"] += 1
        return "h2"

    def h3(state, args, emit):
        called["h3"] += 1
        if emit is not None:
            emit("note")
        return "h3"

    reg.register("a", h2, "a")
    reg.register("b", h3, "b", aliases=["bee"])

    assert reg.handle(state, "/a x") == "h2"
    assert reg.handle(state, "/BEE y", emit=lambda _: None) == "h3"
    assert called == {"h2": 1, "h3": 1}


def test_command_registry_unknown_and_non_command(state: AppState) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "hello") is None
    assert "Unknown command" in (reg.handle(state, "/nope") or "")
    assert "Empty command" in (reg.handle(state, "/") or "")


def test_console_flow_login_add_toggle(state: AppState, backend: FakeBackend) -> None:
    backend.add_user("alice", "secret")
    emitted: list[str] = []

    assert "Not logged in" in registry.handle(state, "/list")
    assert registry.handle(state, "/login alice") == "Usage: /login <user> <password>"

    reply = registry.handle(state, "/login alice secret", emit=emitted.append)
    assert reply.startswith("Logged in as")
    assert emitted == ["Logging in..."]

    assert registry.handle(state, "/add buy some milk") == "Added: 1. [ ] buy some milk"
    assert registry.handle(state, "/toggle 1") == "1. [x] buy some milk"
    assert registry.handle(state, "/ls") == "1. [x] buy some milk"
    assert registry.handle(state, "/toggle 7").startswith("No task #7")
    assert registry.handle(state, "/toggle one") == "Not a task number: one"

    status = registry.handle(state, "/status")
    assert "Tasks: 1 (1 done)" in status


def test_help_lists_commands(state: AppState) -> None:
    text = registry.handle(state, "/help")
    for name in ("/login", "/signup", "/add", "/toggle", "/list"):
        assert name in text
