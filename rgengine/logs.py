"""Tagged engine loggers, coloured console text and logged assertions."""

from __future__ import annotations

import enum
import inspect
import logging
import os
import sys

COLOR_RESET = "\033[0m"
COLOR_BLACK = "\033[30m"
COLOR_RED = "\033[31m"
COLOR_GREEN = "\033[32m"
COLOR_YELLOW = "\033[33m"
COLOR_BLUE = "\033[34m"
COLOR_MAGENTA = "\033[35m"
COLOR_CYAN = "\033[36m"
COLOR_WHITE = "\033[37m"

LOG_FORMAT = "[%(levelname)s] [%(name)s] [%(asctime)s:%(msecs)03d]: %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"


class LoggerTag(enum.Enum):
    """Subsystems that own a logger; the value is the logger's name."""

    GENERAL = "CORE"
    WINDOW = "WINDOW"
    GRAPHICS_API = "OPEN_GL"
    SHADERGEN = "SHADERGEN"


class EngineAssertionError(AssertionError):
    """Raised when an engine assertion fails."""

    def __init__(self, message: str, filename: str, lineno: int) -> None:
        super().__init__(message)
        self.message = message
        self.filename = filename
        self.lineno = lineno


_handlers: dict[LoggerTag, logging.Handler] = {}


def colored(color: str, text: str) -> str:
    """Wrap ``text`` in an ANSI colour code and a reset code."""
    return f"{color}{text}{COLOR_RESET}"


def init_log_system() -> None:
    """Create one logger per tag; calling it again does nothing."""
    if is_log_system_initialized():
        return
    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    for tag in LoggerTag:
        logger = logging.getLogger(tag.value)
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(logging.DEBUG)
        _handlers[tag] = handler


def terminate_log_system() -> None:
    """Detach the handlers installed by :func:`init_log_system`."""
    for tag, handler in _handlers.items():
        logger = logging.getLogger(tag.value)
        logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)
        handler.close()
    _handlers.clear()


def is_log_system_initialized() -> bool:
    return bool(_handlers)


def get_logger(tag: LoggerTag) -> logging.Logger | None:
    """Return the logger for ``tag``, or ``None`` before initialisation."""
    if not is_log_system_initialized():
        return None
    return logging.getLogger(LoggerTag(tag).value)


def engine_assert(condition: object, message: str, *args: object,
                  tag: LoggerTag = LoggerTag.GENERAL) -> None:
    """Log a critical message with the caller's location and raise if ``condition`` is false.

    ``message`` uses ``{}`` placeholders filled from ``args``.
    """
    if condition:
        return
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    if caller is not None:
        filename, lineno = caller.f_code.co_filename, caller.f_lineno
    else:
        filename, lineno = "<unknown>", 0
    del frame, caller

    text = message.format(*args)
    logger = get_logger(tag) or logging.getLogger(LoggerTag(tag).value)
    logger.critical("%s [%s:%d]", text, os.path.basename(filename), lineno)
    raise EngineAssertionError(text, filename, lineno)