"""Enumerations used by the z/OS UNIX file services."""

from __future__ import annotations

from enum import Enum


class _ValueEnum(str, Enum):
    def __str__(self) -> str:
        return self.value


class FileDataType(_ValueEnum):
    """How file contents are transferred."""

    BINARY = "binary"
    TEXT = "text"


class FileTagType(_ValueEnum):
    """Kind of data a file tag declares."""

    BINARY = "binary"
    MIXED = "mixed"
    TEXT = "text"