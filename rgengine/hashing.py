"""Deterministic 64-bit hashing of values and raw memory."""

from __future__ import annotations

import struct
from typing import Any

MASK64 = (1 << 64) - 1

_MEMORY_MULTIPLIER = 1103515245
_COMBINE_MULTIPLIER = 31
_FNV_OFFSET_BASIS = 0xCBF29CE484222325
_FNV_PRIME = 0x100000001B3


def _fnv1a(data: bytes) -> int:
    result = _FNV_OFFSET_BASIS
    for byte in data:
        result ^= byte
        result = (result * _FNV_PRIME) & MASK64
    return result


def hash_memory(data: bytes | bytearray | memoryview | None) -> int:
    """Hash a block of bytes; empty or missing data hashes to 0."""
    if not data:
        return 0
    view = bytes(data)
    full_length = len(view) - len(view) % 8
    result = 0
    for (word,) in struct.iter_unpack("<Q", view[:full_length]):
        result = ((result ^ word) * _MEMORY_MULTIPLIER) & MASK64
    for position, byte in enumerate(view[full_length:]):
        result = ((result ^ (byte << (position * 8))) * _MEMORY_MULTIPLIER) & MASK64
    return result


def hash_value(value: Any) -> int:
    """Return a stable unsigned 64-bit hash of ``value``.

    Objects providing a ``hash()`` method are hashed by it; integers hash to
    themselves, text and bytes with FNV-1a, floats by their IEEE-754 bytes.
    """
    own_hash = getattr(value, "hash", None)
    if callable(own_hash):
        return int(own_hash()) & MASK64
    if isinstance(value, int):
        return int(value) & MASK64
    if isinstance(value, str):
        return _fnv1a(value.encode("utf-8"))
    if isinstance(value, (bytes, bytearray, memoryview)):
        return _fnv1a(bytes(value))
    if isinstance(value, float):
        return hash_memory(struct.pack("<d", value))
    raise TypeError(f"cannot hash value of type {type(value).__name__}; use hash_memory for raw data")


class HashBuilder:
    """Accumulates several hashes into one combined 64-bit value."""

    __slots__ = ("_value",)

    def __init__(self) -> None:
        self._value = 0

    def add_value(self, value: Any) -> None:
        self._value = (self._value * _COMBINE_MULTIPLIER + hash_value(value)) & MASK64

    def add_memory(self, data: bytes | bytearray | memoryview | None) -> None:
        self._value = (self._value * _COMBINE_MULTIPLIER + hash_memory(data)) & MASK64

    def clear(self) -> None:
        self._value = 0

    def value(self) -> int:
        return self._value