"""Integer identifiers with an invalid sentinel, and a pool that recycles them."""

from __future__ import annotations

import functools
from collections import deque


@functools.total_ordering
class BaseID:
    """An unsigned identifier of ``bits`` width; its largest value means invalid."""

    __slots__ = ("value", "bits")

    def __init__(self, value: int | None = None, *, bits: int = 32) -> None:
        if bits <= 0:
            raise ValueError("bits must be positive")
        self.bits = bits
        invalid = self.invalid_value
        if value is None:
            value = invalid
        if not 0 <= value <= invalid:
            raise ValueError(f"identifier {value} does not fit in {bits} bits")
        self.value = value

    @property
    def invalid_value(self) -> int:
        return (1 << self.bits) - 1

    def invalidate(self) -> None:
        self.value = self.invalid_value

    def is_valid(self) -> bool:
        return self.value != self.invalid_value

    def hash(self) -> int:
        return self.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BaseID):
            return NotImplemented
        return self.value == other.value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, BaseID):
            return NotImplemented
        return self.value < other.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __repr__(self) -> str:
        return f"BaseID({self.value}, bits={self.bits})"


class BaseIDPool:
    """Hands out identifiers counting up from zero, reusing released ones first."""

    def __init__(self, *, bits: int = 32) -> None:
        self.bits = bits
        self._free: deque[int] = deque()
        self._next = 0

    def allocate(self) -> BaseID:
        if self._free:
            return BaseID(self._free.popleft(), bits=self.bits)
        allocated = BaseID(self._next, bits=self.bits)
        self._next += 1
        return allocated

    def deallocate(self, id_: BaseID) -> None:
        """Return ``id_`` to the pool and invalidate it in place."""
        if id_.value < self._next and id_.value not in self._free:
            self._free.append(id_.value)
        id_.invalidate()

    def reset(self) -> None:
        self._free.clear()
        self._next = 0

    def next_id(self) -> BaseID:
        return BaseID(self._next, bits=self.bits)

    def is_any_allocated(self) -> bool:
        return self._next > 0 and len(self._free) < self._next

    def is_allocated(self, id_: BaseID) -> bool:
        return id_.value < self._next and id_.value not in self._free