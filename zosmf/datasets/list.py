"""Listing datasets by name pattern."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any, Iterable, Mapping

import requests

from ..core import ClientCore, Endpoint, get_transaction_id
from ..errors import InvalidValueError
from .common import format_optional_y_n, parse_optional_y_n

NO_DATE = "***None***"
_DATE_FORMAT = "%Y/%m/%d"


class DatasetVolume(str, Enum):
    """Special values the server reports in place of a volume serial."""

    ALIAS = "*ALIAS"
    MIGRATED = "MIGRAT"
    VSAM = "*VSAM*"

    def __str__(self) -> str:
        return self.value


def parse_volume(value: str) -> DatasetVolume | str:
    """Return the special volume marker for ``value``, or the volume serial itself."""
    try:
        return DatasetVolume(value)
    except ValueError:
        return value


def parse_optional_date(value: str | None) -> date | None:
    """Decode a "YYYY/MM/DD" date; "***None***" and a missing value give None."""
    if value is None or value == NO_DATE:
        return None
    if not isinstance(value, str):
        raise InvalidValueError(value, ("YYYY/MM/DD", NO_DATE))
    try:
        return datetime.strptime(value, _DATE_FORMAT).date()
    except ValueError as exc:
        raise InvalidValueError(value, ("YYYY/MM/DD", NO_DATE)) from exc


def parse_yes_no(value: str) -> bool:
    """Decode a "YES"/"NO" flag."""
    if value == "YES":
        return True
    if value == "NO":
        return False
    raise InvalidValueError(value, ("YES", "NO"))


def parse_optional_yes_no(value: str | None) -> bool | None:
    """Decode an optional "YES"/"NO" flag."""
    if value is None:
        return None
    return parse_yes_no(value)


def format_yes_no(value: bool) -> str:
    """Encode a flag as "YES"/"NO"."""
    return "YES" if value else "NO"


def format_optional_yes_no(value: bool | None) -> str | None:
    """Encode an optional flag as "YES"/"NO"."""
    if value is None:
        return None
    return format_yes_no(value)


def _require(data: Mapping[str, Any], key: str) -> Any:
    try:
        return data[key]
    except KeyError:
        raise InvalidValueError(dict(data), (key,)) from None


@dataclass(frozen=True)
class DatasetAttributesBase:
    """The full set of attributes reported for a dataset."""

    name: str
    block_size: str | None
    catalog: str | None
    creation_date: date | None
    device_type: str | None
    dataset_type: str | None
    organization: str | None
    expiration_date: date | None
    extents_used: str | None
    record_length: str | None
    migrated: bool
    multi_volume: bool | None
    space_overflow: bool | None
    last_referenced_date: date | None
    record_format: str | None
    size_in_tracks: str | None
    space_units: str | None
    percent_used: str | None
    volume: DatasetVolume | str
    volumes: str | None

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "DatasetAttributesBase":
        """Build the attributes from one item of a list response."""
        return cls(
            name=_require(data, "dsname"),
            block_size=data.get("blksz"),
            catalog=data.get("catnm"),
            creation_date=parse_optional_date(data.get("cdate")),
            device_type=data.get("dev"),
            dataset_type=data.get("dsntp"),
            organization=data.get("dsorg"),
            expiration_date=parse_optional_date(data.get("edate")),
            extents_used=data.get("extx"),
            record_length=data.get("lrecl"),
            migrated=parse_yes_no(_require(data, "migr")),
            multi_volume=parse_optional_y_n(data.get("mvol")),
            space_overflow=parse_optional_yes_no(data.get("ovf")),
            last_referenced_date=parse_optional_date(data.get("rdate")),
            record_format=data.get("recfm"),
            size_in_tracks=data.get("sizex"),
            space_units=data.get("spacu"),
            percent_used=data.get("used"),
            volume=parse_volume(_require(data, "vol")),
            volumes=data.get("vols"),
        )

    def to_json(self) -> dict[str, Any]:
        """Encode the attributes with the server's field names."""

        def iso(value: date | None) -> str | None:
            return value.isoformat() if value is not None else None

        return {
            "dsname": self.name,
            "blksz": self.block_size,
            "catnm": self.catalog,
            "cdate": iso(self.creation_date),
            "dev": self.device_type,
            "dsntp": self.dataset_type,
            "dsorg": self.organization,
            "edate": iso(self.expiration_date),
            "extx": self.extents_used,
            "lrecl": self.record_length,
            "migr": format_yes_no(self.migrated),
            "mvol": format_optional_y_n(self.multi_volume),
            "ovf": format_optional_yes_no(self.space_overflow),
            "rdate": iso(self.last_referenced_date),
            "recfm": self.record_format,
            "sizex": self.size_in_tracks,
            "spacu": self.space_units,
            "used": self.percent_used,
            "vol": str(self.volume),
            "vols": self.volumes,
        }


@dataclass(frozen=True)
class DatasetAttributesName:
    """Only the name of a dataset."""

    name: str

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "DatasetAttributesName":
        """Build the attributes from one item of a list response."""
        return cls(name=_require(data, "dsname"))


@dataclass(frozen=True)
class DatasetAttributesVolume:
    """The name and volume of a dataset."""

    name: str
    volume: DatasetVolume | str

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "DatasetAttributesVolume":
        """Build the attributes from one item of a list response."""
        return cls(
            name=_require(data, "dsname"),
            volume=parse_volume(_require(data, "vol")),
        )


@dataclass(frozen=True)
class DatasetList:
    """One page of a dataset listing."""

    items: tuple[Any, ...]
    json_version: int
    more_rows: bool | None
    returned_rows: int
    total_rows: int | None
    transaction_id: str


_ATTRIBUTE_ITEMS = {
    "base": DatasetAttributesBase,
    "dsname": DatasetAttributesName,
    "vol": DatasetAttributesVolume,
}


class DatasetListBuilder(Endpoint):
    """Builds a request that lists datasets matching a name level."""

    method = "GET"

    def __init__(self, core: ClientCore, level: Any) -> None:
        self.core = core
        self._level = str(level)
        self._volume: str | None = None
        self._start: str | None = None
        self._max_items: int | None = None
        self._attributes: str | None = None
        self._include_total: bool | None = None

    def volume(self, value: Any) -> "DatasetListBuilder":
        """Volume to search for uncataloged datasets."""
        return self._replace(_volume=str(value))

    def start(self, value: Any) -> "DatasetListBuilder":
        """Dataset name to start the listing from."""
        return self._replace(_start=str(value))

    def max_items(self, value: int) -> "DatasetListBuilder":
        """Maximum number of datasets to return."""
        return self._replace(_max_items=int(value))

    def include_total(self, value: bool) -> "DatasetListBuilder":
        """Whether the server should count all matching datasets."""
        return self._replace(_include_total=bool(value))

    def attributes_base(self) -> "DatasetListBuilder":
        """Return every attribute; items become DatasetAttributesBase."""
        return self._replace(_attributes="base")

    def attributes_dsname(self) -> "DatasetListBuilder":
        """Return names only; items become DatasetAttributesName."""
        return self._replace(_attributes="dsname")

    def attributes_vol(self) -> "DatasetListBuilder":
        """Return names and volumes; items become DatasetAttributesVolume."""
        return self._replace(_attributes="vol")

    def _attributes_header(self) -> str | None:
        total = self._include_total is True
        if self._attributes is None:
            return "dsname,total" if total else None
        return self._attributes + (",total" if total else "")

    def _path(self) -> str:
        return "/zosmf/restfiles/ds"

    def _query(self) -> Iterable[tuple[str, Any]]:
        return [
            ("dslevel", self._level),
            ("volser", self._volume),
            ("start", self._start),
        ]

    def _headers(self) -> Iterable[tuple[str, Any]]:
        return [
            ("X-IBM-Max-Items", self._max_items),
            ("X-IBM-Attributes", self._attributes_header()),
        ]

    def _parse(self, response: requests.Response) -> DatasetList:
        transaction_id = get_transaction_id(response)
        document = response.json()
        item_type = _ATTRIBUTE_ITEMS[self._attributes or "dsname"]
        return DatasetList(
            items=tuple(item_type.from_json(item) for item in _require(document, "items")),
            json_version=_require(document, "JSONversion"),
            more_rows=document.get("moreRows"),
            returned_rows=_require(document, "returnedRows"),
            total_rows=document.get("totalRows"),
            transaction_id=transaction_id,
        )