"""Plain-text views of the application log, one per message level."""

from __future__ import annotations

from collections.abc import Iterable

from lenna.logger import Logger, MessageLevel, get_logger

_SECTIONS = (
    MessageLevel.INFO,
    MessageLevel.DEBUG,
    MessageLevel.WARNING,
    MessageLevel.CRITICAL,
    MessageLevel.FATAL,
)


def format_messages(messages: Iterable[str]) -> str:
    """The messages, each on its own line."""
    return "".join(f"{message}\n" for message in messages)


def render_log(logger: Logger | None = None) -> dict[str, str]:
    """Text for the combined history ("Messages") and for each level by its label."""
    logger = logger if logger is not None else get_logger()
    views = {"Messages": format_messages(logger.messages())}
    for level in _SECTIONS:
        views[level.value] = format_messages(logger.messages(level))
    return views