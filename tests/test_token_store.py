# tests/test_token_store.py

from __future__ import annotations

import json
from pathlib import Path

from taskboard.storage.token_store import TOKEN_KEY, MemoryTokenStore, TokenStore


def test_token_persists_across_instances(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "local_storage.json"
    store = TokenStore(path)
    assert store.get_token() is None

    store.set_token("abc")

    assert TokenStore(path).get_token() == "abc"
    assert json.loads(path.read_text("utf-8")) == {TOKEN_KEY: "abc"}


def test_other_slots_are_preserved(tmp_path: Path) -> None:
    path = tmp_path / "local_storage.json"
    path.write_text(json.dumps({"theme": "dark"}), "utf-8")
    store = TokenStore(path)

    store.set_token("abc")
    store.clear_token()

    assert store.get_token() is None
    assert json.loads(path.read_text("utf-8")) == {"theme": "dark"}


def test_corrupt_storage_reads_as_empty(tmp_path: Path) -> None:
    path = tmp_path / "local_storage.json"
    path.write_text("{not json", "utf-8")
    store = TokenStore(path)

    assert store.get_token() is None
    store.set_token("fresh")
    assert store.get_token() == "fresh"


def test_memory_token_store() -> None:
    store = MemoryTokenStore()
    assert store.get_token() is None
    store.set_token("t")
    assert store.get_token() == "t"
    store.clear_token()
    assert store.get_token() is None
