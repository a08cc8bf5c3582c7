# src/taskboard/transport/graphql.py

from __future__ import annotations

import logging
from typing import Any

import httpx

from ..core.ports import TokenStorage
from ..errors import MalformedResponseError, NetworkError, classify_graphql_errors, classify_status
from .http import bearer_headers, decode_json, error_text

logger = logging.getLogger(__name__)


class GraphQLClient:
    """
    Minimal GraphQL-over-HTTP client: one POST per operation.

    A response carrying a non-empty `errors` array is a failure even with HTTP 200.
    """

    def __init__(
        self,
        url: str,
        tokens: TokenStorage,
        *,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._url = url
        self._tokens = tokens
        self._client = httpx.Client(timeout=timeout, transport=transport)

    def close(self) -> None:
        self._client.close()

    def execute(
        self,
        query: str,
        variables: dict[str, Any] | None = None,
        *,
        operation_name: str | None = None,
    ) -> dict[str, Any]:
        payload: dict[str, Any] = {"query": query, "variables": variables or {}}
        if operation_name:
            payload["operationName"] = operation_name

        logger.debug("GraphQL %s -> %s", operation_name or "<anonymous>", self._url)
        try:
            resp = self._client.post(self._url, json=payload, headers=bearer_headers(self._tokens))
        except httpx.TransportError as e:
            raise NetworkError(f"GraphQL {operation_name} failed: {e.__class__.__name__}") from e

        if not resp.is_success:
            # Many servers answer 4xx with a regular GraphQL errors body.
            try:
                err_body = resp.json()
            except ValueError:
                err_body = None
            errors = err_body.get("errors") if isinstance(err_body, dict) else None
            if isinstance(errors, list) and errors and resp.status_code == 400:
                raise classify_graphql_errors(errors)
            raise classify_status(resp.status_code, error_text(resp))

        body = decode_json(resp)
        if not isinstance(body, dict):
            raise MalformedResponseError("GraphQL response is not an object.")

        errors = body.get("errors")
        if errors:
            raise classify_graphql_errors(errors if isinstance(errors, list) else [errors])

        data = body.get("data")
        if not isinstance(data, dict):
            raise MalformedResponseError("GraphQL response has no data.")
        return data
