"""Interned string identifiers keyed by their hash."""

from __future__ import annotations

import functools
import logging

from .hashing import MASK64, hash_value

INVALID_ID = MASK64
PREALLOCATED_IDS_COUNT = 8192
AVERAGE_STR_SIZE = 32
PREALLOCATED_STORAGE_SIZE = PREALLOCATED_IDS_COUNT * AVERAGE_STR_SIZE

_log = logging.getLogger(__name__)


class StrIDStorage:
    """Stores each distinct string once and looks it up by its hash."""

    def __init__(self, capacity: int = PREALLOCATED_STORAGE_SIZE) -> None:
        self._texts: dict[int, str] = {}
        self._size = 0
        self._capacity = capacity

    def store(self, text: str | None) -> int:
        """Intern ``text`` and return its identifier; ``None`` gives the invalid id."""
        if text is None:
            return INVALID_ID
        id_ = hash_value(text)
        if id_ not in self._texts:
            new_size = self._size + len(text) + 1
            if new_size > self._capacity:
                _log.warning("string storage overflow, growing to %d", new_size * 2)
                self._capacity = new_size * 2
            self._texts[id_] = text
            self._size = new_size
        return id_

    def load(self, id_: int) -> str | None:
        return self._texts.get(id_)

    def exists(self, id_: int) -> bool:
        return id_ in self._texts

    def size(self) -> int:
        return self._size

    def capacity(self) -> int:
        return self._capacity


@functools.total_ordering
class StrID:
    """A cheap, comparable handle to an interned string."""

    __slots__ = ("_id",)

    _storage = StrIDStorage()

    def __init__(self, text: str | None = None) -> None:
        self._id = self._storage.store(text)

    def text(self) -> str | None:
        return self._storage.load(self._id)

    def id(self) -> int:
        return self._id

    def is_valid(self) -> bool:
        return self._id != INVALID_ID

    def hash(self) -> int:
        return self._id

    @staticmethod
    def storage_size() -> int:
        return StrID._storage.size()

    @staticmethod
    def storage_capacity() -> int:
        return StrID._storage.capacity()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StrID):
            return NotImplemented
        return self._id == other._id

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, StrID):
            return NotImplemented
        return self._id < other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __str__(self) -> str:
        return self.text() or ""

    def __repr__(self) -> str:
        return f"StrID({self.text()!r})"