# src/taskboard/errors.py

"""
Request failure taxonomy.

Callers of the request layer only ever see "no result"; these classes exist so the
layer itself can log (and word notices) by failure kind. Nothing is retried.
"""

from __future__ import annotations


class RequestError(Exception):
    """Base class: the request did not produce a usable result."""

    kind = "request"
    retryable = False

    def __init__(self, message: str, *, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status


class NetworkError(RequestError):
    kind = "network"
    retryable = True


class AuthorizationError(RequestError):
    kind = "authorization"


class ValidationError(RequestError):
    kind = "validation"


class ServerError(RequestError):
    kind = "server"
    retryable = True


class MalformedResponseError(RequestError):
    kind = "malformed"


def classify_status(status: int, message: str = "") -> RequestError:
    """Map a non-success HTTP status onto the taxonomy."""
    text = message or f"HTTP {status}"
    if status in (401, 403):
        return AuthorizationError(text, status=status)
    if status >= 500:
        return ServerError(text, status=status)
    return ValidationError(text, status=status)


# GraphQL servers report failures in `errors[].extensions.code`.
_GRAPHQL_CODES: dict[str, type[RequestError]] = {
    "UNAUTHENTICATED": AuthorizationError,
    "FORBIDDEN": AuthorizationError,
    "BAD_USER_INPUT": ValidationError,
    "GRAPHQL_VALIDATION_FAILED": ValidationError,
    "GRAPHQL_PARSE_FAILED": ValidationError,
    "INTERNAL_SERVER_ERROR": ServerError,
}


def classify_graphql_errors(errors: list) -> RequestError:
    first = errors[0] if errors else {}
    if not isinstance(first, dict):
        return ValidationError(str(first))

    message = str(first.get("message") or "GraphQL error")
    ext = first.get("extensions")
    code = ext.get("code") if isinstance(ext, dict) else None

    cls = _GRAPHQL_CODES.get(str(code or "").upper(), ValidationError)
    return cls(message)


def friendly_request_error_message(err: RequestError, action: str) -> str:
    """User-facing notice text for a failed action."""
    if isinstance(err, NetworkError):
        return f"Could not {action}: the server is unreachable. Try again later."
    if isinstance(err, AuthorizationError):
        return f"Could not {action}: not authorized. Please log in again."
    if isinstance(err, ServerError):
        return f"Could not {action}: the server failed. Try again later."
    if isinstance(err, MalformedResponseError):
        return f"Could not {action}: unexpected response from the server."
    return f"Could not {action}: {err}"
