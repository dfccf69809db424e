"""Integer-keyed records stored in the red-black tree, with compare and format helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class Record:
    """A tree item ordered by ``key`` that may carry an arbitrary payload."""

    key: int
    payload: Any = None


def compare_records(a: Record, b: Record) -> int:
    """Three-way comparison of two records by key: -1, 0 or 1."""
    if a is None or b is None:
        raise TypeError("cannot compare a missing record")
    if a.key == b.key:
        return 0
    return 1 if a.key > b.key else -1


def format_key(record: Record) -> str:
    """Render a record as its decimal key."""
    if record is None:
        raise TypeError("cannot format a missing record")
    return str(record.key)


def format_char(record: Record) -> str:
    """Render a record as the ASCII character of its key."""
    if record is None:
        raise TypeError("cannot format a missing record")
    return chr(record.key & 127)