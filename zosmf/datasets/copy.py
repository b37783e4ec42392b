"""Copying datasets, members and files into datasets."""

from __future__ import annotations

from enum import Enum
from typing import Any, Mapping

from ..core import ClientCore, Endpoint
from .common import member_suffix, volume_prefix


class DatasetCopyEnqueue(str, Enum):
    """Enqueue type used while copying."""

    EXCLU = "EXCLU"
    SHR = "SHR"
    SHRW = "SHRW"

    def __str__(self) -> str:
        return self.value


class _CopyTarget(Endpoint):
    method = "PUT"

    def __init__(self, core: ClientCore, to_dataset: Any) -> None:
        self.core = core
        self._to_dataset = str(to_dataset)
        self._volume: str | None = None
        self._to_member: str | None = None
        self._replace_existing: bool | None = None

    def _path(self) -> str:
        return (
            f"/zosmf/restfiles/ds{volume_prefix(self._volume)}"
            f"/{self._to_dataset}{member_suffix(self._to_member)}"
        )


class DatasetCopyBuilder(_CopyTarget):
    """Builds a request that copies a dataset or member into a dataset."""

    def __init__(self, core: ClientCore, from_dataset: Any, to_dataset: Any) -> None:
        super().__init__(core, to_dataset)
        self._from_dataset = str(from_dataset)
        self._from_member: str | None = None
        self._alias: bool | None = None
        self._enqueue: DatasetCopyEnqueue | None = None

    def from_member(self, value: Any) -> "DatasetCopyBuilder":
        """Member of the source dataset to copy."""
        return self._replace(_from_member=str(value))

    def volume(self, value: Any) -> "DatasetCopyBuilder":
        """Volume of an uncataloged target dataset."""
        return self._replace(_volume=str(value))

    def to_member(self, value: Any) -> "DatasetCopyBuilder":
        """Member of the target dataset."""
        return self._replace(_to_member=str(value))

    def alias(self, value: bool) -> "DatasetCopyBuilder":
        """Whether to copy aliases along with the member."""
        return self._replace(_alias=bool(value))

    def enqueue(self, value: Any) -> "DatasetCopyBuilder":
        """Enqueue type held on the target while copying."""
        return self._replace(_enqueue=DatasetCopyEnqueue(value))

    def replace(self, value: bool) -> "DatasetCopyBuilder":
        """Whether to replace existing members of the target."""
        return self._replace(_replace_existing=bool(value))

    def _body(self) -> Mapping[str, Any]:
        source: dict[str, Any] = {"dsn": self._from_dataset}
        if self._from_member is not None:
            source["member"] = self._from_member
        if self._alias is not None:
            source["alias"] = self._alias
        body: dict[str, Any] = {"request": "copy", "from-dataset": source}
        if self._enqueue is not None:
            body["enq"] = self._enqueue.value
        body["replace"] = self._replace_existing
        return {"json": body}


class DatasetCopyFileBuilder(_CopyTarget):
    """Builds a request that copies a z/OS UNIX file into a dataset."""

    def __init__(self, core: ClientCore, from_path: Any, to_dataset: Any) -> None:
        super().__init__(core, to_dataset)
        self._from_path = str(from_path)
        self._file_type: str | None = None

    def file_type(self, value: Any) -> "DatasetCopyFileBuilder":
        """How the source file is interpreted, such as binary or text."""
        return self._replace(_file_type=str(value))

    def volume(self, value: Any) -> "DatasetCopyFileBuilder":
        """Volume of an uncataloged target dataset."""
        return self._replace(_volume=str(value))

    def to_member(self, value: Any) -> "DatasetCopyFileBuilder":
        """Member of the target dataset."""
        return self._replace(_to_member=str(value))

    def replace(self, value: bool) -> "DatasetCopyFileBuilder":
        """Whether to replace an existing target."""
        return self._replace(_replace_existing=bool(value))

    def _body(self) -> Mapping[str, Any]:
        source: dict[str, Any] = {"filename": self._from_path}
        if self._file_type is not None:
            source["file_type"] = self._file_type
        body = {
            "request": "copy",
            "from-file": source,
            "replace": self._replace_existing,
        }
        return {"json": body}