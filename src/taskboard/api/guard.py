# src/taskboard/api/guard.py

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, TypeVar

from ..core.ports import Notifier
from ..errors import MalformedResponseError, RequestError, friendly_request_error_message

logger = logging.getLogger(__name__)

T = TypeVar("T")


def guarded(notifier: Notifier, action: str, call: Callable[[], T], default: T) -> T:
    """
    Run one request and collapse every failure into `default`.

    The caller never sees an exception: the failure is logged with its kind
    and the user gets a notice instead.
    """
    try:
        return call()
    except RequestError as e:
        logger.info("Request failed (%s, status=%s) while trying to %s: %s", e.kind, e.status, action, e)
        notifier.notify(friendly_request_error_message(e, action))
        return default
    except OSError as e:
        logger.warning("Local storage failed while trying to %s: %s", action, e)
        notifier.notify(f"Could not {action}: local storage is not writable.")
        return default
    except Exception:
        logger.exception("Unexpected error while trying to %s.", action)
        notifier.notify(f"Could not {action}: unexpected error.")
        return default


def response_field(data: Any, name: str) -> Any:
    """Pull one key out of a response object, or fail as malformed."""
    if not isinstance(data, dict) or name not in data:
        raise MalformedResponseError(f"Response has no {name!r} field.")
    return data[name]


def access_token(data: Any) -> str:
    token = response_field(data, "accessToken")
    if not isinstance(token, str) or not token.strip():
        raise MalformedResponseError("Response has an empty accessToken.")
    return token
