"""Enumerations and helpers shared by the dataset endpoints."""

from __future__ import annotations

from enum import Enum

import requests

from ..errors import InvalidValueError

SESSION_REF_HEADER = "X-IBM-Session-Ref"


class _ValueEnum(str, Enum):
    def __str__(self) -> str:
        return self.value


class DatasetDataType(_ValueEnum):
    """How dataset contents are transferred."""

    BINARY = "binary"
    RECORD = "record"
    TEXT = "text"


class DatasetEnqueue(_ValueEnum):
    """Enqueue type requested on a dataset."""

    EXCLU = "EXCLU"
    SHRW = "SHRW"


class DatasetMigratedRecall(_ValueEnum):
    """What to do when a dataset has been migrated."""

    ERROR = "error"
    NO_WAIT = "nowait"
    WAIT = "wait"


def parse_optional_y_n(value: str | None) -> bool | None:
    """Decode an optional "Y"/"N" flag."""
    if value is None:
        return None
    if value == "Y":
        return True
    if value == "N":
        return False
    raise InvalidValueError(value, ("Y", "N"))


def format_optional_y_n(value: bool | None) -> str | None:
    """Encode an optional flag as "Y"/"N"."""
    if value is None:
        return None
    return "Y" if value else "N"


def member_suffix(member: str | None) -> str:
    """Return the "(MEMBER)" path suffix, or an empty string."""
    return f"({member})" if member is not None else ""


def volume_prefix(volume: str | None) -> str:
    """Return the "/-(VOLUME)" path segment, or an empty string."""
    return f"/-({volume})" if volume is not None else ""


def get_session_ref(response: requests.Response) -> str | None:
    """Return the session reference header of a response, if present."""
    return response.headers.get(SESSION_REF_HEADER)