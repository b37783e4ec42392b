"""Migrating datasets with HSM and recalling them."""

from __future__ import annotations

from typing import Any, ClassVar, Mapping

import requests

from ..core import ClientCore, Endpoint, get_etag
from .common import member_suffix


class _HsmBuilder(Endpoint):
    method = "PUT"
    request_name: ClassVar[str]

    def __init__(self, core: ClientCore, dataset: Any) -> None:
        self.core = core
        self._dataset = str(dataset)
        self._member: str | None = None
        self._wait: bool | None = None

    def _path(self) -> str:
        return f"/zosmf/restfiles/ds/{self._dataset}{member_suffix(self._member)}"

    def _body(self) -> Mapping[str, Any]:
        return {"json": {"request": self.request_name, "wait": self._wait is True}}


class DatasetMigrateBuilder(_HsmBuilder):
    """Builds a request that migrates a dataset; the result is its ETag."""

    request_name = "hmigrate"

    def member(self, value: Any) -> "DatasetMigrateBuilder":
        """Member to address in the path."""
        return self._replace(_member=str(value))

    def wait(self, value: bool) -> "DatasetMigrateBuilder":
        """Whether to wait for the migration to complete."""
        return self._replace(_wait=bool(value))

    def _parse(self, response: requests.Response) -> str | None:
        return get_etag(response)


class DatasetRecallBuilder(_HsmBuilder):
    """Builds a request that recalls a migrated dataset."""

    request_name = "hrecall"

    def member(self, value: Any) -> "DatasetRecallBuilder":
        """Member to address in the path."""
        return self._replace(_member=str(value))

    def wait(self, value: bool) -> "DatasetRecallBuilder":
        """Whether to wait for the recall to complete."""
        return self._replace(_wait=bool(value))