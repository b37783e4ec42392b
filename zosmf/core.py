"""Shared client state and the base class for request builders."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, ClassVar, Iterable, Mapping, TypeVar

import requests

from .errors import MissingHeaderError, check_status

ETAG_HEADER = "Etag"
TRANSACTION_ID_HEADER = "X-IBM-Txid"

_E = TypeVar("_E", bound="Endpoint")


@dataclass
class ClientCore:
    """The HTTP session and base URL shared by every request."""

    base_url: str
    session: requests.Session = field(default_factory=requests.Session)

    def __post_init__(self) -> None:
        self.base_url = self.base_url.rstrip("/")

    def url(self, path: str) -> str:
        """Return the absolute URL for an API path."""
        if not path.startswith("/"):
            path = "/" + path
        return f"{self.base_url}{path}"


def _as_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class Endpoint(ABC):
    """Base class for request builders.

    Subclasses provide a ``core`` attribute, set ``method`` and describe the
    request through ``_path``, ``_query``, ``_headers`` and ``_body``.
    Query parameters and headers whose value is None are left out.
    """

    method: ClassVar[str] = "GET"
    core: ClientCore

    @abstractmethod
    def _path(self) -> str:
        """Request path below the base URL."""

    def _query(self) -> Iterable[tuple[str, Any]]:
        return ()

    def _headers(self) -> Iterable[tuple[str, Any]]:
        return ()

    def _body(self) -> Mapping[str, Any]:
        """Keyword arguments for the request body, such as ``json`` or ``data``."""
        return {}

    def _parse(self, response: requests.Response) -> Any:
        return response.text

    def _replace(self: _E, **changes: Any) -> _E:
        clone = copy.copy(self)
        for name, value in changes.items():
            setattr(clone, name, value)
        return clone

    def get_request(self) -> requests.PreparedRequest:
        """Prepare the HTTP request without sending it."""
        params = [(k, _as_text(v)) for k, v in self._query() if v is not None]
        headers = {k: _as_text(v) for k, v in self._headers() if v is not None}
        request = requests.Request(
            self.method,
            self.core.url(self._path()),
            params=params,
            headers=headers,
            **self._body(),
        )
        return self.core.session.prepare_request(request)

    def build(self) -> Any:
        """Send the request and convert the response into the result."""
        response = self.core.session.send(self.get_request())
        return self._parse(check_status(response))


def get_etag(response: requests.Response) -> str | None:
    """Return the ETag header of a response, if present."""
    return response.headers.get(ETAG_HEADER)


def get_transaction_id(response: requests.Response) -> str:
    """Return the z/OSMF transaction id of a response."""
    value = response.headers.get(TRANSACTION_ID_HEADER)
    if value is None:
        raise MissingHeaderError(TRANSACTION_ID_HEADER, "transaction id")
    return value