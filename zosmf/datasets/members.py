"""Listing the members of partitioned datasets."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Iterable, Mapping

import requests

from ..core import ClientCore, Endpoint
from ..errors import InvalidValueError
from .common import DatasetMigratedRecall, parse_optional_y_n


def _require(data: Mapping[str, Any], key: str) -> Any:
    try:
        return data[key]
    except KeyError:
        raise InvalidValueError(dict(data), (key,)) from None


def _optional_int(value: Any) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidValueError(value, ("an integer",))
    return value


def _optional_iso_date(value: Any) -> date | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise InvalidValueError(value, ("YYYY-MM-DD",))
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise InvalidValueError(value, ("YYYY-MM-DD",)) from exc


@dataclass(frozen=True)
class MemberAttributesBase:
    """The full set of attributes reported for a member."""

    name: str
    version: int | None
    modification_level: int | None
    creation_date: date | None
    modification_date: date | None
    current_number_of_records: int | None
    initial_number_of_records: int | None
    modified_number_of_records: int | None
    modified_time: str | None
    modified_seconds: str | None
    user: str | None
    modified_by_sclm: bool | None
    authorization_code: str | None
    amode: str | None
    attributes: str | None
    rmode: str | None
    size: str | None
    ttr: str | None
    ssi: str | None

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "MemberAttributesBase":
        """Build the attributes from one item of a member list response."""
        return cls(
            name=_require(data, "member"),
            version=_optional_int(data.get("vers")),
            modification_level=_optional_int(data.get("mod")),
            creation_date=_optional_iso_date(data.get("c4date")),
            modification_date=_optional_iso_date(data.get("m4date")),
            current_number_of_records=_optional_int(data.get("cnorc")),
            initial_number_of_records=_optional_int(data.get("inorc")),
            modified_number_of_records=_optional_int(data.get("mnorc")),
            modified_time=data.get("mtime"),
            modified_seconds=data.get("msec"),
            user=data.get("user"),
            modified_by_sclm=parse_optional_y_n(data.get("sclm")),
            authorization_code=data.get("ac"),
            amode=data.get("amode"),
            attributes=data.get("attr"),
            rmode=data.get("rmode"),
            size=data.get("size"),
            ttr=data.get("ttr"),
            ssi=data.get("ssi"),
        )


@dataclass(frozen=True)
class MemberAttributesName:
    """Only the name of a member."""

    name: str

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "MemberAttributesName":
        """Build the attributes from one item of a member list response."""
        return cls(name=_require(data, "member"))


@dataclass(frozen=True)
class MemberList:
    """One page of a member listing."""

    items: tuple[Any, ...]
    json_version: int
    more_rows: bool | None
    returned_rows: int
    total_rows: int | None


_ATTRIBUTE_ITEMS = {
    "base": MemberAttributesBase,
    "member": MemberAttributesName,
}


class MemberListBuilder(Endpoint):
    """Builds a request that lists the members of a partitioned dataset."""

    method = "GET"

    def __init__(self, core: ClientCore, dataset: Any) -> None:
        self.core = core
        self._dataset = str(dataset)
        self._start: str | None = None
        self._pattern: str | None = None
        self._max_items: int | None = None
        self._attributes: str | None = None
        self._include_total: bool | None = None
        self._migrated_recall: DatasetMigratedRecall | None = None

    def start(self, value: Any) -> "MemberListBuilder":
        """Member name to start the listing from."""
        return self._replace(_start=str(value))

    def pattern(self, value: Any) -> "MemberListBuilder":
        """Pattern that member names must match."""
        return self._replace(_pattern=str(value))

    def max_items(self, value: int) -> "MemberListBuilder":
        """Maximum number of members to return."""
        return self._replace(_max_items=int(value))

    def include_total(self, value: bool) -> "MemberListBuilder":
        """Whether the server should count all matching members."""
        return self._replace(_include_total=bool(value))

    def migrated_recall(self, value: Any) -> "MemberListBuilder":
        """What to do if the dataset has been migrated."""
        return self._replace(_migrated_recall=DatasetMigratedRecall(value))

    def attributes_base(self) -> "MemberListBuilder":
        """Return every attribute; items become MemberAttributesBase."""
        return self._replace(_attributes="base")

    def attributes_member(self) -> "MemberListBuilder":
        """Return names only; items become MemberAttributesName."""
        return self._replace(_attributes="member")

    def _attributes_header(self) -> str | None:
        total = self._include_total is True
        if self._attributes is None:
            return "member,total" if total else None
        return self._attributes + (",total" if total else "")

    def _path(self) -> str:
        return f"/zosmf/restfiles/ds/{self._dataset}/member"

    def _query(self) -> Iterable[tuple[str, Any]]:
        return [("start", self._start), ("pattern", self._pattern)]

    def _headers(self) -> Iterable[tuple[str, Any]]:
        return [
            ("X-IBM-Max-Items", self._max_items),
            ("X-IBM-Attributes", self._attributes_header()),
            ("X-IBM-Migrated-Recall", self._migrated_recall),
        ]

    def _parse(self, response: requests.Response) -> MemberList:
        document = response.json()
        item_type = _ATTRIBUTE_ITEMS[self._attributes or "member"]
        return MemberList(
            items=tuple(item_type.from_json(item) for item in _require(document, "items")),
            json_version=_require(document, "JSONversion"),
            more_rows=document.get("moreRows"),
            returned_rows=_require(document, "returnedRows"),
            total_rows=document.get("totalRows"),
        )