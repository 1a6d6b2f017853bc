"""Scoped capture of log records emitted through the standard logging module."""

from __future__ import annotations

import logging
import threading
from collections import deque
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from dataclasses import dataclass
from types import ModuleType
from typing import Protocol

from simple_assertions.configuration.runtime_settings import LogCaptureSettings
from simple_assertions.log_levels import level_name, resolve_level

_LOGGER = logging.getLogger("simple_assertions.log_capture")

LoggerTarget = str | type | ModuleType | logging.Logger


@dataclass(frozen=True)
class CapturedEvent:
    """Log event observed on a watched logger."""

    level: int
    message_template: str
    rendered_message: str
    logger_name: str
    args: tuple[object, ...]
    thread_id: int | None = None

    @property
    def level_name(self) -> str:
        """Return the display name of the event level."""
        return level_name(self.level)

    @classmethod
    def from_record(cls, record: logging.LogRecord) -> CapturedEvent:
        """Convert a `LogRecord` into a captured event."""
        return cls(
            level=record.levelno,
            message_template=str(record.msg),
            rendered_message=record.getMessage(),
            logger_name=record.name,
            args=_normalize_args(record.args),
            thread_id=record.thread,
        )


class CaptureSource(Protocol):
    """Ordered, drainable list of captured events."""

    @property
    def events(self) -> tuple[CapturedEvent, ...]:
        """Return captured events in arrival order."""

    def discard(self, count: int) -> None:
        """Drop the `count` oldest captured events."""


class LogCaptureHandler(logging.Handler):
    """Handler that records every event of exactly one logger name."""

    def __init__(
        self,
        logger_name: str,
        *,
        thread_id: int | None = None,
        level: int = logging.NOTSET,
    ) -> None:
        super().__init__(level=level)
        self.logger_name = logger_name
        self.thread_id = thread_id
        self._events: deque[CapturedEvent] = deque()

    @property
    def events(self) -> tuple[CapturedEvent, ...]:
        """Return captured events in arrival order."""
        self.acquire()
        try:
            return tuple(self._events)
        finally:
            self.release()

    def emit(self, record: logging.LogRecord) -> None:
        if record.name != self.logger_name:
            return
        if self.thread_id is not None and record.thread != self.thread_id:
            return
        try:
            event = CapturedEvent.from_record(record)
        except Exception:  # pylint: disable=broad-exception-caught
            self.handleError(record)
            return
        self._events.append(event)

    def discard(self, count: int) -> None:
        """Drop the `count` oldest captured events."""
        self.acquire()
        try:
            for _ in range(min(count, len(self._events))):
                self._events.popleft()
        finally:
            self.release()

    def clear(self) -> None:
        """Drop every captured event."""
        self.acquire()
        try:
            self._events.clear()
        finally:
            self.release()


def logger_name_for(target: LoggerTarget) -> str:
    """Resolve the logger name watched for a target.

    A module maps to its `__name__`, which is the logger most code obtains
    through `logging.getLogger(__name__)`. A class maps to
    `"<module>.<QualName>"`, so pass a class only when its code logs through a
    class-named logger.
    """
    if isinstance(target, logging.Logger):
        return target.name
    if isinstance(target, ModuleType):
        return target.__name__
    if isinstance(target, type):
        return f"{target.__module__}.{target.__qualname__}"
    if isinstance(target, str):
        if not target.strip():
            raise ValueError("Logger name must not be empty.")
        return target
    raise TypeError("Capture target must be a logger name, a Logger, a module or a class.")


@contextmanager
def capture_logs(
    target: LoggerTarget,
    *,
    level: int | str | None = None,
    only_current_thread: bool | None = None,
    settings: LogCaptureSettings | None = None,
) -> Iterator[LogCaptureHandler]:
    """Capture events of one logger for the duration of the block.

    The handler is attached to the watched logger itself, never to the root
    logger, and is detached again on every exit path. The logger level is
    lowered to `level` while capturing and restored afterwards. Loggers are
    process-wide: use `only_current_thread` when other threads log through
    the same logger name. Explicit arguments override `settings`.
    """
    resolved = settings or LogCaptureSettings()
    name = logger_name_for(target)
    logger = target if isinstance(target, logging.Logger) else logging.getLogger(name)
    capture_level = resolve_level(resolved.level if level is None else level)
    current_thread_only = (
        resolved.only_current_thread if only_current_thread is None else only_current_thread
    )
    handler = LogCaptureHandler(
        name,
        thread_id=threading.get_ident() if current_thread_only else None,
    )
    previous_level = logger.level
    if logger.getEffectiveLevel() > capture_level:
        logger.setLevel(capture_level)
    logger.addHandler(handler)
    _LOGGER.debug("Attached log capture to logger '%s'", name)
    try:
        yield handler
    finally:
        logger.removeHandler(handler)
        logger.setLevel(previous_level)
        handler.close()
        _LOGGER.debug("Detached log capture from logger '%s'", name)


def _normalize_args(args: object) -> tuple[object, ...]:
    if args is None:
        return ()
    if isinstance(args, Mapping):
        return (args,)
    if isinstance(args, tuple):
        return args
    return (args,)
