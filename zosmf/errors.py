"""Exceptions raised by the z/OSMF client and response status checking."""

from __future__ import annotations

import json
from typing import Any, Iterable

import requests


class ZOsmfError(Exception):
    """Base class for every error raised by this package."""


class ApiError(ZOsmfError):
    """An error response returned by the z/OSMF REST API.

    When the server answers with its JSON error document, ``category``,
    ``return_code``, ``reason``, ``message`` and ``details`` are filled in.
    Otherwise the raw response text is kept in ``body``.
    """

    def __init__(
        self,
        url: str,
        status: int,
        *,
        category: int | None = None,
        return_code: int | None = None,
        reason: int | None = None,
        message: str | None = None,
        details: list[str] | None = None,
        body: str | None = None,
    ) -> None:
        self.url = url
        self.status = status
        self.category = category
        self.return_code = return_code
        self.reason = reason
        self.message = message
        self.details = details
        self.body = body
        super().__init__(url, status)

    @property
    def is_json(self) -> bool:
        """Whether the server sent a structured JSON error document."""
        return self.message is not None

    def __str__(self) -> str:
        if self.is_json:
            detail = (
                f"category={self.category} rc={self.return_code} "
                f"reason={self.reason} message={self.message!r}"
            )
            if self.details:
                detail += f" details={self.details!r}"
        else:
            detail = repr(self.body)
        return f"z/OSMF API error response: {self.status} from {self.url}: {detail}"


class MissingHeaderError(ZOsmfError):
    """A response lacks a header that the operation requires."""

    def __init__(self, header: str, description: str) -> None:
        self.header = header
        self.description = description
        super().__init__(f"missing {description}")


class InvalidValueError(ZOsmfError, ValueError):
    """A value received from or passed to the API is not one of the allowed ones."""

    def __init__(self, value: Any, expected: Iterable[str] = ()) -> None:
        self.value = value
        self.expected = tuple(expected)
        text = f"invalid value: {value!r}"
        if self.expected:
            text += f" (expected one of {', '.join(self.expected)})"
        super().__init__(text)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _parse_error_document(body: str) -> dict[str, Any] | None:
    try:
        document = json.loads(body)
    except ValueError:
        return None
    if not isinstance(document, dict):
        return None

    category = document.get("category")
    return_code = document.get("rc")
    reason = document.get("reason")
    message = document.get("message")
    details = document.get("details")

    if not (_is_int(category) and _is_int(return_code) and _is_int(reason)):
        return None
    if not isinstance(message, str):
        return None
    if details is not None and not (
        isinstance(details, list) and all(isinstance(d, str) for d in details)
    ):
        return None

    return {
        "category": category,
        "return_code": return_code,
        "reason": reason,
        "message": message,
        "details": details,
    }


def check_status(response: requests.Response) -> requests.Response:
    """Return the response unchanged if it succeeded, otherwise raise ApiError."""
    if response.ok:
        return response

    url = str(response.url)
    status = response.status_code
    body = response.text
    fields = _parse_error_document(body)
    if fields is None:
        raise ApiError(url, status, body=body)
    raise ApiError(url, status, **fields)