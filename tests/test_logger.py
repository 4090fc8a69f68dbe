import io
import logging

import pytest

from lenna.logger import Logger, LoggerHandler, MessageLevel, get_logger, reset_logger


@pytest.mark.parametrize(
    "method,level",
    [
        ("debug", MessageLevel.DEBUG),
        ("info", MessageLevel.INFO),
        ("warning", MessageLevel.WARNING),
        ("critical", MessageLevel.CRITICAL),
        ("fatal", MessageLevel.FATAL),
    ],
)
def test_level_methods_record_messages(method, level):
    log = Logger()
    getattr(log, method)("hello")
    assert log.messages(level) == ["hello"]
    assert log.messages() == [f"{level.value}: hello"]
    others = [lvl for lvl in MessageLevel if lvl is not level]
    assert all(log.messages(lvl) == [] for lvl in others)


def test_combined_history_keeps_order():
    log = Logger()
    log.debug("a")
    log.warning("b")
    log.info("c")
    assert log.messages() == ["Debug: a", "Warning: b", "Info: c"]


def test_messages_returns_copy():
    log = Logger()
    log.info("x")
    log.messages(MessageLevel.INFO).append("y")
    assert log.messages(MessageLevel.INFO) == ["x"]


def test_listeners_level_then_general():
    log = Logger()
    calls = []
    log.connect(lambda m: calls.append(("any", m)))
    log.connect(lambda m: calls.append(("info", m)), MessageLevel.INFO)
    log.info("msg")
    log.debug("dbg")
    assert calls == [("info", "msg"), ("any", "msg"), ("any", "dbg")]


def test_disconnect():
    log = Logger()
    seen = []
    log.connect(seen.append, MessageLevel.WARNING)
    log.warning("one")
    log.disconnect(seen.append, MessageLevel.WARNING)
    log.warning("two")
    assert seen == ["one"]
    with pytest.raises(ValueError):
        log.disconnect(seen.append, MessageLevel.WARNING)


def test_log_accepts_label():
    log = Logger()
    log.log("Critical", "boom")
    assert log.messages(MessageLevel.CRITICAL) == ["boom"]


def _make_logger(handler):
    pylog = logging.getLogger("lenna.test.handler")
    pylog.handlers = [handler]
    pylog.setLevel(logging.DEBUG)
    pylog.propagate = False
    return pylog


def test_handler_forwards_and_writes():
    log = Logger()
    stream = io.StringIO()
    pylog = _make_logger(LoggerHandler(log, stream))
    pylog.debug("hello %s", "world")
    pylog.error("bad")
    pylog.critical("worse")
    assert log.messages(MessageLevel.DEBUG) == ["hello world"]
    assert log.messages(MessageLevel.CRITICAL) == ["bad"]
    assert log.messages(MessageLevel.FATAL) == ["worse"]
    out = stream.getvalue().splitlines()
    assert out[0].startswith("Debug: hello world (")
    assert "test_handler_forwards_and_writes)" in out[0]
    assert out[1].startswith("Critical: bad (")


def test_handler_ignores_info():
    log = Logger()
    stream = io.StringIO()
    pylog = _make_logger(LoggerHandler(log, stream))
    pylog.info("quiet")
    assert log.messages() == []
    assert stream.getvalue() == ""


def test_handler_defaults_to_shared_logger():
    reset_logger()
    try:
        stream = io.StringIO()
        pylog = _make_logger(LoggerHandler(stream=stream))
        pylog.warning("shared")
        assert get_logger().messages(MessageLevel.WARNING) == ["shared"]
    finally:
        reset_logger()


def test_singleton_and_reset():
    reset_logger()
    first = get_logger()
    assert get_logger() is first
    first.info("kept")
    reset_logger()
    second = get_logger()
    assert second is not first
    assert second.messages() == []
    reset_logger()