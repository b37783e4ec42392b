"""Renaming datasets and partitioned dataset members."""

from __future__ import annotations

from typing import Any, Mapping

from ..core import ClientCore, Endpoint
from .common import DatasetEnqueue, member_suffix


class DatasetRenameBuilder(Endpoint):
    """Builds a request that renames a dataset or member."""

    method = "PUT"

    def __init__(self, core: ClientCore, from_dataset: Any, to_dataset: Any) -> None:
        self.core = core
        self._from_dataset = str(from_dataset)
        self._to_dataset = str(to_dataset)
        self._from_member: str | None = None
        self._to_member: str | None = None
        self._enqueue: DatasetEnqueue | None = None

    def from_member(self, value: Any) -> "DatasetRenameBuilder":
        """Member being renamed."""
        return self._replace(_from_member=str(value))

    def to_member(self, value: Any) -> "DatasetRenameBuilder":
        """New member name."""
        return self._replace(_to_member=str(value))

    def enqueue(self, value: Any) -> "DatasetRenameBuilder":
        """Enqueue type held while renaming."""
        return self._replace(_enqueue=DatasetEnqueue(value))

    def _path(self) -> str:
        return f"/zosmf/restfiles/ds/{self._to_dataset}{member_suffix(self._to_member)}"

    def _body(self) -> Mapping[str, Any]:
        source: dict[str, Any] = {"dsn": self._from_dataset}
        if self._from_member is not None:
            source["member"] = self._from_member
        body: dict[str, Any] = {"request": "rename", "from-dataset": source}
        if self._enqueue is not None:
            body["enq"] = self._enqueue.value
        return {"json": body}