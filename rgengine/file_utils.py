"""Whole-file reading and writing, and directory walking helpers."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Callable, Iterator

from .logs import LoggerTag

_log = logging.getLogger(LoggerTag.GENERAL.value)

PathLike = str | os.PathLike


def _read(path: PathLike, binary: bool) -> str | bytes:
    empty: str | bytes = b"" if binary else ""
    target = Path(path)
    if not target.exists():
        _log.warning("File reading error. File %s doesn't exist.", target)
        return empty
    try:
        if binary:
            return target.read_bytes()
        return target.read_text(encoding="utf-8")
    except OSError:
        _log.warning("File reading error. Failed to open %s file.", target)
        return empty


def _write(path: PathLike, data: str | bytes | None, binary: bool) -> None:
    target = Path(path)
    if data is None:
        _log.warning("File %s writing warning. data is None", target)
        return
    if len(data) == 0:
        _log.warning("File %s writing warning. data size is 0", target)
        return
    try:
        if binary:
            target.write_bytes(data)
        else:
            target.write_text(data, encoding="utf-8")
    except OSError:
        _log.warning("File writing error. Failed to open %s file.", target)


def read_text_file(path: PathLike) -> str:
    """Return the file's text, or an empty string if it cannot be read."""
    return _read(path, binary=False)


def read_binary_file(path: PathLike) -> bytes:
    """Return the file's bytes, or empty bytes if it cannot be read."""
    return _read(path, binary=True)


def write_text_file(path: PathLike, data: str | None) -> None:
    """Replace the file's contents with ``data``; empty data writes nothing."""
    _write(path, data, binary=False)


def write_binary_file(path: PathLike, data: bytes | None) -> None:
    """Replace the file's contents with ``data``; empty data writes nothing."""
    _write(path, data, binary=True)


def count_files(directory: PathLike) -> int:
    """Count regular files directly inside ``directory``."""
    return sum(1 for entry in Path(directory).iterdir() if entry.is_file())


def count_directories(directory: PathLike) -> int:
    """Count subdirectories directly inside ``directory``."""
    return sum(1 for entry in Path(directory).iterdir() if entry.is_dir())


def _entries(root: PathLike) -> Iterator[Path]:
    return iter(sorted(Path(root).iterdir()))


def _deeper(depth: int | None) -> int | None:
    return None if depth is None else depth - 1


def for_each_directory(root: PathLike, func: Callable[[Path], object],
                       depth: int | None = None) -> None:
    """Call ``func`` on every directory under ``root``.

    ``depth`` limits how many levels below the direct children are visited;
    ``None`` visits all of them.
    """
    for entry in _entries(root):
        if entry.is_dir():
            func(entry)
            if depth != 0:
                for_each_directory(entry, func, _deeper(depth))


def for_each_file(root: PathLike, func: Callable[[Path], object],
                  depth: int | None = None) -> None:
    """Call ``func`` on every file under ``root``, descending at most ``depth`` levels."""
    for entry in _entries(root):
        if entry.is_dir():
            if depth != 0:
                for_each_file(entry, func, _deeper(depth))
            continue
        func(entry)


def find_first_file_if(root: PathLike, predicate: Callable[[Path], object],
                       depth: int | None = None) -> Path | None:
    """Return the first file under ``root`` matching ``predicate``, or ``None``."""
    for entry in _entries(root):
        if entry.is_dir():
            if depth != 0:
                found = find_first_file_if(entry, predicate, _deeper(depth))
                if found is not None:
                    return found
        elif predicate(entry):
            return entry
    return None