"""Writing to sequential datasets and partitioned dataset members."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping

import requests

from ..core import TRANSACTION_ID_HEADER, ClientCore, Endpoint, get_etag
from .common import (
    DatasetDataType,
    DatasetEnqueue,
    DatasetMigratedRecall,
    member_suffix,
    volume_prefix,
)

_DATA_TYPE_HEADER = "X-IBM-Data-Type"


@dataclass(frozen=True)
class DatasetWrite:
    """Metadata returned after writing a dataset."""

    etag: str | None
    transaction_id: str | None


class DatasetWriteBuilder(Endpoint):
    """Builds a request that writes data to a dataset or member."""

    method = "PUT"

    def __init__(self, core: ClientCore, dataset: Any) -> None:
        self.core = core
        self._dataset = str(dataset)
        self._volume: str | None = None
        self._member: str | None = None
        self._if_match: str | None = None
        self._data_type: DatasetDataType | None = None
        self._data: bytes | None = None
        self._encoding: str | None = None
        self._crlf_newlines: bool | None = None
        self._migrated_recall: DatasetMigratedRecall | None = None
        self._obtain_enq: DatasetEnqueue | None = None
        self._session_ref: str | None = None
        self._release_enq: bool | None = None
        self._dsname_encoding: str | None = None

    def volume(self, value: Any) -> "DatasetWriteBuilder":
        """Volume of an uncataloged dataset."""
        return self._replace(_volume=str(value))

    def member(self, value: Any) -> "DatasetWriteBuilder":
        """Member of a partitioned dataset to write."""
        return self._replace(_member=str(value))

    def if_match(self, value: Any) -> "DatasetWriteBuilder":
        """Only write if the current contents still have this ETag."""
        return self._replace(_if_match=str(value))

    def encoding(self, value: Any) -> "DatasetWriteBuilder":
        """Code page to convert text data into."""
        return self._replace(_encoding=str(value))

    def crlf_newlines(self, value: bool) -> "DatasetWriteBuilder":
        """Whether text data uses CRLF line endings."""
        return self._replace(_crlf_newlines=bool(value))

    def migrated_recall(self, value: Any) -> "DatasetWriteBuilder":
        """What to do if the dataset has been migrated."""
        return self._replace(_migrated_recall=DatasetMigratedRecall(value))

    def obtain_enq(self, value: Any) -> "DatasetWriteBuilder":
        """Enqueue to obtain on the dataset."""
        return self._replace(_obtain_enq=DatasetEnqueue(value))

    def session_ref(self, value: Any) -> "DatasetWriteBuilder":
        """Session reference of an earlier request holding an enqueue."""
        return self._replace(_session_ref=str(value))

    def release_enq(self, value: bool) -> "DatasetWriteBuilder":
        """Whether to release the enqueue held by the session."""
        return self._replace(_release_enq=bool(value))

    def dsname_encoding(self, value: Any) -> "DatasetWriteBuilder":
        """Code page used for the dataset name."""
        return self._replace(_dsname_encoding=str(value))

    def binary(self, data: bytes) -> "DatasetWriteBuilder":
        """Write raw bytes."""
        return self._replace(_data_type=DatasetDataType.BINARY, _data=bytes(data))

    def record(self, data: bytes) -> "DatasetWriteBuilder":
        """Write length-prefixed records."""
        return self._replace(_data_type=DatasetDataType.RECORD, _data=bytes(data))

    def text(self, data: Any) -> "DatasetWriteBuilder":
        """Write text."""
        return self._replace(
            _data_type=DatasetDataType.TEXT, _data=str(data).encode("utf-8")
        )

    def _data_type_header(self) -> str | None:
        if self._data_type in (DatasetDataType.BINARY, DatasetDataType.RECORD):
            return str(self._data_type)
        if self._data_type is not DatasetDataType.TEXT:
            return None
        crlf = self._crlf_newlines is True
        if self._encoding is not None:
            suffix = ";crlf=true" if crlf else ""
            return f"text;fileEncoding={self._encoding}{suffix}"
        return "text;crlf=true" if crlf else None

    def _path(self) -> str:
        return (
            f"/zosmf/restfiles/ds{volume_prefix(self._volume)}"
            f"/{self._dataset}{member_suffix(self._member)}"
        )

    def _headers(self) -> Iterable[tuple[str, Any]]:
        return [
            ("If-Match", self._if_match),
            (_DATA_TYPE_HEADER, self._data_type_header()),
            ("X-IBM-Migrated-Recall", self._migrated_recall),
            ("X-IBM-Obtain-ENQ", self._obtain_enq),
            ("X-IBM-Session-Ref", self._session_ref),
            ("X-IBM-Release-ENQ", "true" if self._release_enq is True else None),
            ("X-IBM-Dsname-Encoding", self._dsname_encoding),
        ]

    def _body(self) -> Mapping[str, Any]:
        if self._data is None:
            return {}
        return {"data": self._data}

    def _parse(self, response: requests.Response) -> DatasetWrite:
        return DatasetWrite(
            etag=get_etag(response),
            transaction_id=response.headers.get(TRANSACTION_ID_HEADER),
        )