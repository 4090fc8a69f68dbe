"""Application-wide message log with per-level history and listeners."""

from __future__ import annotations

import logging
import sys
import threading
from collections.abc import Callable
from enum import Enum
from typing import TextIO

Listener = Callable[[str], None]


class MessageLevel(Enum):
    """Severity of a logged message; the value is its display label."""

    DEBUG = "Debug"
    INFO = "Info"
    WARNING = "Warning"
    CRITICAL = "Critical"
    FATAL = "Fatal"


class Logger:
    """Keeps every message, both per level and in one combined history."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._messages: list[str] = []
        self._by_level: dict[MessageLevel, list[str]] = {level: [] for level in MessageLevel}
        self._listeners: dict[MessageLevel | None, list[Listener]] = {
            None: [],
            **{level: [] for level in MessageLevel},
        }

    def log(self, level: MessageLevel | str, msg: str) -> None:
        """Record ``msg`` at ``level`` and notify listeners."""
        level = MessageLevel(level)
        with self._lock:
            self._by_level[level].append(msg)
            self._messages.append(f"{level.value}: {msg}")
            listeners = [*self._listeners[level], *self._listeners[None]]
        for callback in listeners:
            callback(msg)

    def debug(self, msg: str) -> None:
        self.log(MessageLevel.DEBUG, msg)

    def info(self, msg: str) -> None:
        self.log(MessageLevel.INFO, msg)

    def warning(self, msg: str) -> None:
        self.log(MessageLevel.WARNING, msg)

    def critical(self, msg: str) -> None:
        self.log(MessageLevel.CRITICAL, msg)

    def fatal(self, msg: str) -> None:
        self.log(MessageLevel.FATAL, msg)

    def messages(self, level: MessageLevel | None = None) -> list[str]:
        """Messages of one level, or the prefixed combined history if ``level`` is None."""
        with self._lock:
            if level is None:
                return list(self._messages)
            return list(self._by_level[MessageLevel(level)])

    def connect(self, callback: Listener, level: MessageLevel | None = None) -> None:
        """Call ``callback(msg)`` for new messages of ``level`` (any level if None)."""
        key = None if level is None else MessageLevel(level)
        with self._lock:
            self._listeners[key].append(callback)

    def disconnect(self, callback: Listener, level: MessageLevel | None = None) -> None:
        """Remove a listener; raises ValueError if it was not connected."""
        key = None if level is None else MessageLevel(level)
        with self._lock:
            self._listeners[key].remove(callback)


def _level_for(levelno: int) -> MessageLevel | None:
    if levelno >= logging.CRITICAL:
        return MessageLevel.FATAL
    if levelno >= logging.ERROR:
        return MessageLevel.CRITICAL
    if levelno >= logging.WARNING:
        return MessageLevel.WARNING
    if levelno < logging.INFO:
        return MessageLevel.DEBUG
    # Informational records are not forwarded by the message handler.
    return None


class LoggerHandler(logging.Handler):
    """Forwards standard logging records into a Logger and echoes them to a stream."""

    def __init__(self, logger: Logger | None = None, stream: TextIO | None = None) -> None:
        super().__init__()
        self.logger = logger
        self.stream = stream

    def emit(self, record: logging.LogRecord) -> None:
        level = _level_for(record.levelno)
        if level is None:
            return
        try:
            msg = record.getMessage()
            (self.logger or get_logger()).log(level, msg)
            stream = self.stream if self.stream is not None else sys.stderr
            stream.write(
                f"{level.value}: {msg} ({record.pathname}:{record.lineno}, {record.funcName})\n"
            )
            stream.flush()
        except Exception:
            self.handleError(record)


_instance: Logger | None = None
_instance_lock = threading.Lock()


def get_logger() -> Logger:
    """Return the shared application logger, creating it on first use."""
    global _instance
    if _instance is None:
        with _instance_lock:
            if _instance is None:
                _instance = Logger()
    return _instance


def reset_logger() -> None:
    """Drop the shared logger so the next get_logger() starts afresh."""
    global _instance
    with _instance_lock:
        _instance = None