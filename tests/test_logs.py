import logging

import pytest

from rgengine.logs import (
    COLOR_RED,
    COLOR_RESET,
    EngineAssertionError,
    LoggerTag,
    colored,
    engine_assert,
    get_logger,
    init_log_system,
    is_log_system_initialized,
    terminate_log_system,
)


@pytest.fixture
def log_system():
    init_log_system()
    yield
    terminate_log_system()


def test_uninitialized_has_no_logger():
    terminate_log_system()
    assert is_log_system_initialized() is False
    assert get_logger(LoggerTag.GENERAL) is None


def test_init_and_terminate():
    init_log_system()
    try:
        assert is_log_system_initialized() is True
    finally:
        terminate_log_system()
    assert is_log_system_initialized() is False


def test_init_twice_keeps_single_handler(log_system):
    before = len(get_logger(LoggerTag.GENERAL).handlers)
    init_log_system()
    assert len(get_logger(LoggerTag.GENERAL).handlers) == before


@pytest.mark.parametrize(
    "tag,name",
    [
        (LoggerTag.GENERAL, "CORE"),
        (LoggerTag.WINDOW, "WINDOW"),
        (LoggerTag.GRAPHICS_API, "OPEN_GL"),
        (LoggerTag.SHADERGEN, "SHADERGEN"),
    ],
)
def test_logger_names(log_system, tag, name):
    assert get_logger(tag).name == name


def test_logger_accepts_debug(log_system):
    assert get_logger(LoggerTag.WINDOW).isEnabledFor(logging.DEBUG)


def test_colored():
    assert colored(COLOR_RED, "hi") == "\033[31mhi\033[0m"
    assert colored(COLOR_RED, "x").endswith(COLOR_RESET)


def test_assert_true_returns_none(log_system):
    assert engine_assert(True, "never {}", 1) is None


def test_assert_false_raises_with_formatted_message(log_system):
    with pytest.raises(EngineAssertionError) as info:
        engine_assert(False, "bad value {} in {}", 7, "slot")
    assert str(info.value) == "bad value 7 in slot"
    assert info.value.filename.endswith("test_logs.py")
    assert info.value.lineno > 0


def test_assert_logs_critical_with_location(log_system, caplog):
    with caplog.at_level(logging.DEBUG, logger="OPEN_GL"):
        with pytest.raises(EngineAssertionError):
            engine_assert(0, "broken", tag=LoggerTag.GRAPHICS_API)
    records = [r for r in caplog.records if r.name == "OPEN_GL"]
    assert len(records) == 1
    assert records[0].levelno == logging.CRITICAL
    assert records[0].getMessage().startswith("broken [test_logs.py:")


def test_assert_works_without_log_system():
    terminate_log_system()
    with pytest.raises(AssertionError) as info:
        engine_assert(False, "plain {}", 3)
    assert str(info.value) == "plain 3"
    assert is_log_system_initialized() is False