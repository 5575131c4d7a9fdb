"""Readable failure messages from Orders API error responses.

The API answers errors in two shapes:

- Domain errors (400/404/409) from the Protean handlers:
  ``{"error": {"field": ["msg", ...]}, "correlation_id": "..."}``, where
  ``error`` may also be a plain string.
- Request body validation (422) from FastAPI:
  ``{"detail": [{"loc": [...], "msg": "..."}]}``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from requests import Response

_MAX_LEN = 300


def _field_errors(error) -> str:
    if not isinstance(error, dict):
        return str(error)
    parts = []
    for field, messages in error.items():
        if isinstance(messages, list):
            messages = "; ".join(str(m) for m in messages)
        parts.append(f"{field}: {messages}")
    return " | ".join(parts)


def _validation_errors(detail: list) -> str:
    parts = []
    for err in detail:
        # Drop the leading "body" so the message names the payload field
        loc = [str(p) for p in err.get("loc", []) if p != "body"]
        msg = err.get("msg", str(err))
        parts.append(f"{'.'.join(loc)}: {msg}" if loc else msg)
    return " | ".join(parts)


def extract_error_detail(response: Response) -> str:
    """One-line summary of an error body for Locust failures and logs.

    Domain errors carry their correlation id so a failure can be matched
    with the server's log lines.
    """
    try:
        body = response.json()
    except ValueError:
        return (getattr(response, "text", "") or "")[:_MAX_LEN] or "(empty response body)"

    if not isinstance(body, dict):
        return str(body)[:_MAX_LEN]

    if "error" in body:
        message = _field_errors(body["error"])
        correlation_id = body.get("correlation_id")
        return f"{message} [correlation_id={correlation_id}]" if correlation_id else message

    if isinstance(body.get("detail"), list):
        return _validation_errors(body["detail"])

    return str(body)[:_MAX_LEN]
