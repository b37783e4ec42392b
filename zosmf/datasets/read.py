"""Reading sequential datasets and partitioned dataset members."""

from __future__ import annotations

from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, Iterable, Mapping

import requests

from ..core import ClientCore, Endpoint, get_etag, get_transaction_id
from .common import (
    DatasetDataType,
    DatasetEnqueue,
    DatasetMigratedRecall,
    get_session_ref,
    member_suffix,
    volume_prefix,
)


@dataclass(frozen=True)
class DatasetRead:
    """Contents of a dataset or member together with the response metadata.

    ``data`` is text for text reads and bytes for binary or record reads.
    It is None when an ``If-None-Match`` ETag still matched and the server
    answered "304 Not Modified".
    """

    data: str | bytes | None
    etag: str | None
    session_ref: str | None
    transaction_id: str


class DatasetReadBuilder(Endpoint):
    """Builds a request that reads a dataset or member."""

    method = "GET"

    def __init__(self, core: ClientCore, dataset: Any) -> None:
        self.core = core
        self._dataset = str(dataset)
        self._volume: str | None = None
        self._member: str | None = None
        self._search: str | None = None
        self._regex_search: str | None = None
        self._search_is_regex: bool | None = None
        self._search_case_sensitive: bool | None = None
        self._search_max_return: int | None = None
        self._if_none_match: str | None = None
        self._data_type: DatasetDataType | None = None
        self._encoding: str | None = None
        self._return_etag: bool | None = None
        self._migrated_recall: DatasetMigratedRecall | None = None
        self._record_range: str | None = None
        self._obtain_enq: DatasetEnqueue | None = None
        self._session_ref: str | None = None
        self._release_enq: bool | None = None
        self._dsname_encoding: str | None = None

    def volume(self, value: Any) -> "DatasetReadBuilder":
        """Volume of an uncataloged dataset."""
        return self._replace(_volume=str(value))

    def member(self, value: Any) -> "DatasetReadBuilder":
        """Member of a partitioned dataset to read."""
        return self._replace(_member=str(value))

    def search(self, value: Any) -> "DatasetReadBuilder":
        """Return only the records from the first one containing this string."""
        return self._replace(_search=str(value))

    def regex_search(self, value: Any) -> "DatasetReadBuilder":
        """Return only the records from the first one matching this expression."""
        return self._replace(_regex_search=str(value))

    def search_is_regex(self, value: bool) -> "DatasetReadBuilder":
        """Mark the search string as a regular expression."""
        return self._replace(_search_is_regex=bool(value))

    def search_case_sensitive(self, value: bool) -> "DatasetReadBuilder":
        """Whether the search is case sensitive."""
        return self._replace(_search_case_sensitive=bool(value))

    def search_max_return(self, value: int) -> "DatasetReadBuilder":
        """Maximum number of records returned by a search."""
        return self._replace(_search_max_return=int(value))

    def if_none_match(self, etag: Any) -> "DatasetReadBuilder":
        """Only return data if it differs from the version with this ETag."""
        return self._replace(_if_none_match=str(etag))

    def encoding(self, value: Any) -> "DatasetReadBuilder":
        """Code page of the dataset contents."""
        return self._replace(_encoding=str(value))

    def return_etag(self, value: bool) -> "DatasetReadBuilder":
        """Whether the server should always return an ETag."""
        return self._replace(_return_etag=bool(value))

    def migrated_recall(self, value: Any) -> "DatasetReadBuilder":
        """What to do if the dataset has been migrated."""
        return self._replace(_migrated_recall=DatasetMigratedRecall(value))

    def record_range(self, value: Any) -> "DatasetReadBuilder":
        """Range of records to read, such as "0-100" or "10,50"."""
        return self._replace(_record_range=str(value))

    def obtain_enq(self, value: Any) -> "DatasetReadBuilder":
        """Enqueue to obtain on the dataset."""
        return self._replace(_obtain_enq=DatasetEnqueue(value))

    def session_ref(self, value: Any) -> "DatasetReadBuilder":
        """Session reference of an earlier request holding an enqueue."""
        return self._replace(_session_ref=str(value))

    def release_enq(self, value: bool) -> "DatasetReadBuilder":
        """Whether to release the enqueue held by the session."""
        return self._replace(_release_enq=bool(value))

    def dsname_encoding(self, value: Any) -> "DatasetReadBuilder":
        """Code page used for the dataset name."""
        return self._replace(_dsname_encoding=str(value))

    def binary(self) -> "DatasetReadBuilder":
        """Read the contents as raw bytes."""
        return self._replace(_data_type=DatasetDataType.BINARY)

    def record(self) -> "DatasetReadBuilder":
        """Read the contents as length-prefixed records."""
        return self._replace(_data_type=DatasetDataType.RECORD)

    def text(self) -> "DatasetReadBuilder":
        """Read the contents as text."""
        return self._replace(_data_type=DatasetDataType.TEXT)

    def _data_type_header(self) -> str | None:
        if self._data_type is not None and self._encoding is not None:
            return f"{self._data_type};fileEncoding={self._encoding}"
        if self._data_type is not None:
            return str(self._data_type)
        if self._encoding is not None:
            return f"text;fileEncoding={self._encoding}"
        return None

    def _path(self) -> str:
        return (
            f"/zosmf/restfiles/ds{volume_prefix(self._volume)}"
            f"/{self._dataset}{member_suffix(self._member)}"
        )

    def _query(self) -> Iterable[tuple[str, Any]]:
        return [
            ("search", self._search),
            ("research", self._regex_search),
            ("insensitive", "false" if self._search_case_sensitive is True else None),
            ("maxreturnsize", self._search_max_return),
        ]

    def _headers(self) -> Iterable[tuple[str, Any]]:
        return [
            ("If-None-Match", self._if_none_match),
            ("X-IBM-Data-Type", self._data_type_header()),
            ("X-IBM-Return-Etag", "true" if self._return_etag is True else None),
            ("X-IBM-Migrated-Recall", self._migrated_recall),
            ("X-IBM-Record-Range", self._record_range),
            ("X-IBM-Obtain-ENQ", self._obtain_enq),
            ("X-IBM-Session-Ref", self._session_ref),
            ("X-IBM-Release-ENQ", "true" if self._release_enq is True else None),
            ("X-IBM-Dsname-Encoding", self._dsname_encoding),
        ]

    def _body(self) -> Mapping[str, Any]:
        return {}

    def _parse(self, response: requests.Response) -> DatasetRead:
        etag = get_etag(response)
        session_ref = get_session_ref(response)
        transaction_id = get_transaction_id(response)

        data: str | bytes | None
        if (
            self._if_none_match is not None
            and response.status_code == HTTPStatus.NOT_MODIFIED
        ):
            data = None
        elif self._data_type in (DatasetDataType.BINARY, DatasetDataType.RECORD):
            data = response.content
        else:
            data = response.text

        return DatasetRead(
            data=data,
            etag=etag,
            session_ref=session_ref,
            transaction_id=transaction_id,
        )