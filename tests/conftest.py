# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import httpx
import pytest

from taskboard.cli.bootstrap import create_initial_state
from taskboard.core.state import AppState
from taskboard.storage.token_store import MemoryTokenStore

from .fakes import BASE_URL, GRAPHQL_URL, FakeBackend, RecordingNotifier


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap and the console commands.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="taskboard",
        log_level="INFO",
        transport="http",
        api_base_url=BASE_URL,
        graphql_url=GRAPHQL_URL,
        request_timeout=None,
        console_enabled=False,
        data_dir=tmp_path,
        storage_path=tmp_path / "local_storage.json",
    )


@pytest.fixture()
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture()
def transport(backend: FakeBackend) -> httpx.MockTransport:
    return httpx.MockTransport(backend.handler)


@pytest.fixture()
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture()
def tokens() -> MemoryTokenStore:
    return MemoryTokenStore()


@pytest.fixture(params=["http", "graphql"])
def transport_name(request) -> str:
    return request.param


@pytest.fixture()
def state(
    settings: SimpleNamespace,
    transport_name: str,
    transport: httpx.MockTransport,
    notifier: RecordingNotifier,
    tokens: MemoryTokenStore,
) -> AppState:
    """
    AppState wired against the fake backend, once per transport.

    NOTE: the real request layer and httpx clients are used; only the network is fake.
    """
    settings.transport = transport_name
    return create_initial_state(settings=settings, notifier=notifier, tokens=tokens, transport=transport)
