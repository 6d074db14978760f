"""Shader resource kinds and their binding slots."""

from __future__ import annotations

import enum
from dataclasses import dataclass

UNBOUND = -1


class ShaderResourceType(enum.IntEnum):
    """Kinds of resources a shader program can take."""

    TYPE_BOOL = 0
    TYPE_INT = 1
    TYPE_UINT = 2
    TYPE_FLOAT = 3
    TYPE_DOUBLE = 4
    TYPE_SAMPLER_2D = 5
    TYPE_CONST_BUFFER = 6


@dataclass(frozen=True)
class ShaderResourceBinding:
    """Where a resource of a given type is bound: uniform location or binding point.

    A slot that does not apply is -1.
    """

    type: ShaderResourceType
    location: int = UNBOUND
    binding: int = UNBOUND

    @property
    def has_location(self) -> bool:
        return self.location != UNBOUND

    @property
    def has_binding(self) -> bool:
        return self.binding != UNBOUND