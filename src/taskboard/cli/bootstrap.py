# src/taskboard/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the chosen transport (REST or GraphQL) into AppState,
- closes network clients on shutdown.
"""

from __future__ import annotations

import contextlib
import logging

import httpx

from ..api.graphql import GraphQLSessionApi, GraphQLTaskApi
from ..api.rest import RestSessionApi, RestTaskApi
from ..config import get_settings
from ..core.notify import LoggingNotifier
from ..core.ports import Notifier, SessionApi, TaskApi, TokenStorage
from ..core.state import AppState
from ..storage.token_store import TokenStore
from ..transport.graphql import GraphQLClient
from ..transport.http import JsonHttpClient

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.storage_path.parent.mkdir(parents=True, exist_ok=True)


def build_apis(
    settings,
    tokens: TokenStorage,
    notifier: Notifier,
    *,
    transport: httpx.BaseTransport | None = None,
) -> tuple[TaskApi, SessionApi]:
    """Build the request layer for settings.transport ("http" or "graphql")."""
    timeout = getattr(settings, "request_timeout", None)

    if settings.transport == "graphql":
        client = GraphQLClient(settings.graphql_url, tokens, timeout=timeout, transport=transport)
        logger.info("Using GraphQL transport at %s", settings.graphql_url)
        return GraphQLTaskApi(client, notifier), GraphQLSessionApi(client, tokens, notifier)

    http = JsonHttpClient(settings.api_base_url, tokens, timeout=timeout, transport=transport)
    logger.info("Using REST transport at %s", settings.api_base_url)
    return RestTaskApi(http, notifier), RestSessionApi(http, tokens, notifier)


def create_initial_state(
    *,
    settings=None,
    notifier: Notifier | None = None,
    tokens: TokenStorage | None = None,
    transport: httpx.BaseTransport | None = None,
) -> AppState:
    """
    Create AppState from the provided settings.

    Everything is injectable so tests can swap the network (httpx transport),
    the token slot and the notice sink.
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    if notifier is None:
        notifier = LoggingNotifier()
    if tokens is None:
        tokens = TokenStore(settings.storage_path)

    task_api, session_api = build_apis(settings, tokens, notifier, transport=transport)

    return AppState(
        settings=settings,
        task_api=task_api,
        session_api=session_api,
        notifier=notifier,
    )


def shutdown(state: AppState) -> None:
    """Best-effort shutdown (no exceptions should escape)."""
    # Both APIs may share one client; closing an httpx.Client twice is harmless.
    for api in (state.task_api, state.session_api):
        with contextlib.suppress(Exception):
            api.close()
