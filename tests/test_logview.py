import pytest

from lenna.logger import Logger, get_logger, reset_logger
from lenna.logview import format_messages, render_log


@pytest.fixture
def shared_logger():
    reset_logger()
    yield get_logger()
    reset_logger()


def test_format_no_messages():
    assert format_messages([]) == ""


def test_format_messages_one_per_line():
    assert format_messages(["a", "b"]) == "a\nb\n"


def test_render_sections_in_order():
    assert list(render_log(Logger())) == [
        "Messages",
        "Info",
        "Debug",
        "Warning",
        "Critical",
        "Fatal",
    ]


def test_render_log_contents():
    logger = Logger()
    logger.info("x")
    logger.debug("y")
    views = render_log(logger)
    assert views["Messages"] == "Info: x\nDebug: y\n"
    assert views["Info"] == "x\n"
    assert views["Debug"] == "y\n"
    assert views["Fatal"] == ""


def test_render_uses_shared_logger(shared_logger):
    shared_logger.warning("careful")
    assert render_log()["Warning"] == "careful\n"