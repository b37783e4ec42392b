"""Deleting datasets and partitioned dataset members."""

from __future__ import annotations

from typing import Any, Iterable

from ..core import ClientCore, Endpoint
from .common import member_suffix, volume_prefix


class DatasetDeleteBuilder(Endpoint):
    """Builds a request that deletes a dataset or member."""

    method = "DELETE"

    def __init__(self, core: ClientCore, dataset: Any) -> None:
        self.core = core
        self._dataset = str(dataset)
        self._volume: str | None = None
        self._member: str | None = None
        self._dsname_encoding: str | None = None

    def volume(self, value: Any) -> "DatasetDeleteBuilder":
        """Volume of an uncataloged dataset."""
        return self._replace(_volume=str(value))

    def member(self, value: Any) -> "DatasetDeleteBuilder":
        """Member of a partitioned dataset to delete."""
        return self._replace(_member=str(value))

    def dsname_encoding(self, value: Any) -> "DatasetDeleteBuilder":
        """Code page used for the dataset name."""
        return self._replace(_dsname_encoding=str(value))

    def _path(self) -> str:
        return (
            f"/zosmf/restfiles/ds{volume_prefix(self._volume)}"
            f"/{self._dataset}{member_suffix(self._member)}"
        )

    def _headers(self) -> Iterable[tuple[str, Any]]:
        return [("X-IBM-Dsname-Encoding", self._dsname_encoding)]