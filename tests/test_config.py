# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from taskboard.config import Settings, normalize_transport

_VARS = (
    "TASKBOARD_TRANSPORT",
    "TASKBOARD_API_BASE_URL",
    "TASKBOARD_GRAPHQL_URL",
    "TASKBOARD_REQUEST_TIMEOUT_SECONDS",
    "TASKBOARD_DATA_DIR",
    "TASKBOARD_STORAGE_PATH",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    s = Settings.from_env()
    assert s.transport == "http"
    assert s.api_base_url == "http://localhost:3000"
    assert s.graphql_url == "http://localhost:3000/graphql"
    assert s.request_timeout is None
    assert s.storage_path == Path(".local/taskboard") / "local_storage.json"


def test_env_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TASKBOARD_TRANSPORT", "GraphQL")
    monkeypatch.setenv("TASKBOARD_API_BASE_URL", "https://baas.example/")
    monkeypatch.setenv("TASKBOARD_REQUEST_TIMEOUT_SECONDS", "2.5")
    monkeypatch.setenv("TASKBOARD_DATA_DIR", str(tmp_path))

    s = Settings.from_env()
    assert s.transport == "graphql"
    assert s.api_base_url == "https://baas.example"
    assert s.graphql_url == "https://baas.example/graphql"
    assert s.request_timeout == 2.5
    assert s.storage_path == tmp_path / "local_storage.json"


def test_bad_values_fall_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TASKBOARD_REQUEST_TIMEOUT_SECONDS", "soon")
    assert Settings.from_env().request_timeout is None
    assert normalize_transport("soap") == "http"
    assert normalize_transport(None) == "http"
