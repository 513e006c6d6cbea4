"""User-facing message extraction from API error objects.

Handles the shape HTTP clients hand back for a failed call,
``error.response.data = {"message": ..., "errors": {field: msg | [msg, ...]}}``,
through either mapping keys or attributes.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional, Union

from pydantic import BaseModel

FieldErrors = dict[str, Union[str, list[str]]]


class ApiErrorPayload(BaseModel):
    """Message and per-field errors pulled out of an API error."""

    message: Optional[str] = None
    errors: Optional[FieldErrors] = None


def _is_record(value: Any) -> bool:
    return value is not None and not isinstance(value, (str, bytes, int, float))


def _get(obj: Any, key: str) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(key)
    return getattr(obj, key, None)


def _items(obj: Any) -> list[tuple[str, Any]]:
    if isinstance(obj, Mapping):
        return list(obj.items())
    return list(getattr(obj, "__dict__", {}).items())


def get_api_error_payload(error: Any) -> Optional[ApiErrorPayload]:
    """Return the structured payload of ``error``, or None if it has none."""
    if not _is_record(error):
        return None
    response = _get(error, "response")
    if not _is_record(response):
        return None
    data = _get(response, "data")
    if not _is_record(data):
        return None

    raw_message = _get(data, "message")
    message = raw_message if isinstance(raw_message, str) else None

    errors_raw = _get(data, "errors")
    if not _is_record(errors_raw):
        return ApiErrorPayload(message=message)

    parsed: FieldErrors = {}
    for field, detail in _items(errors_raw):
        if isinstance(detail, str):
            parsed[str(field)] = detail
        elif isinstance(detail, list) and all(isinstance(item, str) for item in detail):
            parsed[str(field)] = detail

    if parsed:
        return ApiErrorPayload(message=message, errors=parsed)
    return ApiErrorPayload(message=message)


def get_error_message(error: Any, fallback: str) -> str:
    """Best message to show for ``error``.

    Order: the error itself if it is a string, the payload message, the first
    field error, the error's own message, then ``fallback``.
    """
    if isinstance(error, str):
        return error

    payload = get_api_error_payload(error)
    if payload is not None:
        if payload.message:
            return payload.message
        if payload.errors:
            first = next(iter(payload.errors.values()))
            if isinstance(first, str):
                return first
            if first:
                return first[0]

    if _is_record(error):
        own_message = _get(error, "message")
        if isinstance(own_message, str):
            return own_message
    if isinstance(error, BaseException) and error.args and isinstance(error.args[0], str):
        return error.args[0]

    return fallback
