"""Preprocessing of shader stage sources: version line, defines and includes."""

from __future__ import annotations

import enum
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

from .file_utils import read_text_file

MAX_INCLUDE_DEPTH = 128

_VERSION_PATTERN = re.compile(r"#version\s*(\d+) core")
_INCLUDE_PATTERN = re.compile(r"#include\s*[\"<](.*?)[\">]")


class ShaderStageType(enum.IntEnum):
    """Programmable pipeline stages."""

    VERTEX = 0
    PIXEL = 1


class ShaderPreprocessError(ValueError):
    """Raised when a shader source cannot be preprocessed."""


@dataclass(frozen=True)
class ShaderStageSource:
    """Source code of one shader stage with its defines and include directory."""

    source: str
    type: ShaderStageType
    defines: tuple[str, ...] = ()
    include_dir: str | os.PathLike = "."


def find_version_span(source: str) -> tuple[int, int]:
    """Return the slice bounds of the ``#version N core`` line, newline included."""
    if not source:
        raise ShaderPreprocessError("shader source code is empty")
    match = _VERSION_PATTERN.search(source)
    if match is None:
        raise ShaderPreprocessError("shader preprocessing error: #version is missing")
    begin = match.start()
    return begin, match.end() + 1


def _include_parts(source: str, include_dir: Path, depth: int) -> Iterator[str]:
    if depth >= MAX_INCLUDE_DEPTH:
        raise ShaderPreprocessError("shader include recursion depth overflow")

    remainder = source
    previous_end = 0
    for match in _INCLUDE_PATTERN.finditer(source):
        if match.start() != previous_end:
            yield source[previous_end:match.start()]
            yield "\n"
        previous_end = match.end()
        remainder = source[match.end():]

        included = read_text_file(include_dir / match.group(1))
        if included:
            yield from _include_parts(included, include_dir, depth + 1)

    yield remainder
    yield "\n"


def expand_includes(source: str, include_dir: str | os.PathLike, depth: int = 0) -> str:
    """Replace ``#include`` directives with the contents of the named files.

    Files are looked up relative to ``include_dir``; missing ones are dropped.
    """
    return "".join(_include_parts(source, Path(include_dir), depth))


def preprocess_shader_source(stage: ShaderStageSource) -> str:
    """Return the stage's source with its version line first, then defines, then expanded code."""
    begin, end = find_version_span(stage.source)
    parts = [stage.source[begin:end]]
    for define in stage.defines:
        if define is None:
            raise ShaderPreprocessError("define string is None")
        parts.append(f"#define {define}\n")
    parts.append(expand_includes(stage.source[end:], stage.include_dir))
    return "".join(parts)