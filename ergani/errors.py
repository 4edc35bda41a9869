"""Exceptions raised by the Ergani client."""

from __future__ import annotations

import json
from typing import Any, Optional, Union

__all__ = ["ErganiError", "APIError", "AuthenticationError", "api_error_from_response"]

_MESSAGE_FIELDS = ("message", "msg", "detail")


class ErganiError(Exception):
    """Base class for errors raised by this package."""


class APIError(ErganiError):
    """An error response from the Ergani API."""

    def __init__(self, status_code: int, message: str, response: str = "") -> None:
        self.status_code = status_code
        self.message = message
        self.response = response
        super().__init__(str(self))

    def __str__(self) -> str:
        return f"API error (status {self.status_code}): {self.message}"


class AuthenticationError(ErganiError):
    """Authentication succeeded on the wire but yielded no usable token."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(str(self))

    def __str__(self) -> str:
        return f"authentication failed: {self.message}"


def _field(document: dict, name: str) -> Any:
    if name in document:
        return document[name]
    for key, value in document.items():
        if isinstance(key, str) and key.lower() == name:
            return value
    return None


def _structured_message(text: str) -> Optional[str]:
    try:
        document = json.loads(text)
    except ValueError:
        return None
    if document is None:
        return ""
    if not isinstance(document, dict):
        return None
    values = [_field(document, name) for name in _MESSAGE_FIELDS]
    if any(value is not None and not isinstance(value, str) for value in values):
        return None
    return next((value for value in values if value), "")


def api_error_from_response(status_code: int, body: Union[bytes, str]) -> APIError:
    """Build an APIError from a response, preferring a message/msg/detail field."""
    text = body.decode("utf-8", errors="replace") if isinstance(body, bytes) else body
    message = _structured_message(text) or text
    return APIError(status_code=status_code, message=message, response=text)