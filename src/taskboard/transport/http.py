# src/taskboard/transport/http.py

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from ..core.ports import TokenStorage
from ..errors import MalformedResponseError, NetworkError, classify_status
from .query import serialize_query

logger = logging.getLogger(__name__)


def bearer_headers(tokens: TokenStorage) -> dict[str, str]:
    token = tokens.get_token()
    return {"Authorization": f"Bearer {token}"} if token else {}


def error_text(resp: httpx.Response) -> str:
    """Best-effort message from an error response body."""
    try:
        body = resp.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        for key in ("message", "error", "detail"):
            if body.get(key):
                return f"HTTP {resp.status_code}: {body[key]}"
    return f"HTTP {resp.status_code}"


def decode_json(resp: httpx.Response) -> Any:
    try:
        return resp.json()
    except ValueError as e:
        raise MalformedResponseError(
            f"Response from {resp.request.url} is not JSON.", status=resp.status_code
        ) from e


class JsonHttpClient:
    """
    Thin JSON-over-HTTP client bound to one base URL.

    - attaches the stored bearer token on every call
    - raises RequestError subclasses on any failure; never retries
    - timeout=None means no client-side timeout
    """

    def __init__(
        self,
        base_url: str,
        tokens: TokenStorage,
        *,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._tokens = tokens
        self._client = httpx.Client(base_url=base_url, timeout=timeout, transport=transport)

    def close(self) -> None:
        self._client.close()

    def request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        query: Mapping[str, Any] | None = None,
    ) -> Any:
        url = path
        if query:
            url = f"{path}?{serialize_query(query)}"

        logger.debug("HTTP %s %s", method, url)
        try:
            resp = self._client.request(method, url, json=json, headers=bearer_headers(self._tokens))
        except httpx.TransportError as e:
            raise NetworkError(f"{method} {path} failed: {e.__class__.__name__}") from e

        if not resp.is_success:
            raise classify_status(resp.status_code, error_text(resp))

        return decode_json(resp)

    def get(self, path: str, *, query: Mapping[str, Any] | None = None) -> Any:
        return self.request("GET", path, query=query)

    def post(self, path: str, payload: Any) -> Any:
        return self.request("POST", path, json=payload)

    def patch(self, path: str, payload: Any) -> Any:
        return self.request("PATCH", path, json=payload)
