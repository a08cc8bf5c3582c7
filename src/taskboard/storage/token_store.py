# src/taskboard/storage/token_store.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

TOKEN_KEY = "token"


class TokenStore:
    """
    File-backed "local storage": a JSON object of string slots.

    The session token lives under TOKEN_KEY. Other slots written by someone else are
    preserved on write. A missing or unreadable file reads as "nothing stored".
    """

    def __init__(self, path: str | Path = "local_storage.json") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    # ---- low-level helpers ----

    def _read_all(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text("utf-8"))
        except (OSError, ValueError):
            logger.warning("Local storage at %s is unreadable; treating it as empty.", self._path)
            return {}
        if not isinstance(data, dict):
            return {}
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _write_all(self, data: dict[str, str]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_suffix(".tmp")
        tmp.write_text(json.dumps(data, ensure_ascii=False, indent=2), "utf-8")
        os.replace(tmp, self._path)
        with contextlib.suppress(OSError):
            # The token is a credential: keep the file private on disk.
            os.chmod(self._path, 0o600)

    # ---- slot API ----

    def get_item(self, key: str) -> str | None:
        value = self._read_all().get(key)
        return value or None

    def set_item(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value
        self._write_all(data)
        logger.debug("Local storage: wrote slot %s to %s", key, self._path)

    def remove_item(self, key: str) -> None:
        data = self._read_all()
        if data.pop(key, None) is not None:
            self._write_all(data)

    # ---- token API ----

    def get_token(self) -> str | None:
        return self.get_item(TOKEN_KEY)

    def set_token(self, token: str) -> None:
        self.set_item(TOKEN_KEY, token)

    def clear_token(self) -> None:
        self.remove_item(TOKEN_KEY)


class MemoryTokenStore:
    """Same interface, process-local. Used by tests and when storage is disabled."""

    def __init__(self, token: str | None = None) -> None:
        self._token = token or None

    def get_token(self) -> str | None:
        return self._token

    def set_token(self, token: str) -> None:
        self._token = token or None

    def clear_token(self) -> None:
        self._token = None
