"""Loguru backend - internal implementation detail.

This module is NOT part of the public API. Users should never import from here.
To switch backends, only this file needs to change.

A Dispatcher is installed as loguru's single sink: loguru records become
LogEvents, and stdlib ``logging`` records are routed through loguru first.
"""
from __future__ import annotations

import inspect
import logging
import traceback
from typing import TYPE_CHECKING, Any

from loguru import logger as _loguru

from fmtlog.event import LogEvent
from fmtlog.level import Level

if TYPE_CHECKING:
    from loguru import Message, Record

    from fmtlog.dispatcher import Dispatcher

__all__ = [
    'event_from_record',
    'get_backend',
    'install',
    'intercept_stdlib',
    'loguru_level',
]

_LOGURU_LEVELS = {
    Level.Error: 'ERROR',
    Level.Warn: 'WARNING',
    Level.Info: 'INFO',
    Level.Debug: 'DEBUG',
    Level.Trace: 'TRACE',
}


def loguru_level(level: Level | str | int) -> str:
    """Loguru level name for an fmtlog level (names and ordinals accepted)."""
    level = Level.parse(level)
    if level is Level.Off:
        raise ValueError('Off is a threshold, not an event level')
    return _LOGURU_LEVELS[level]


class InterceptHandler(logging.Handler):
    """Handler that intercepts stdlib logging and forwards to loguru.

    This allows existing code using logging.getLogger('job').info(...)
    to reach the installed dispatcher.
    """

    def emit(self, record: logging.LogRecord) -> None:
        # Get corresponding loguru level
        try:
            level = _loguru.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller from where the log call originated
        frame, depth = inspect.currentframe(), 0
        while frame and (depth == 0 or frame.f_code.co_filename == logging.__file__):
            frame = frame.f_back
            depth += 1

        _loguru.bind(logger_name=record.name).opt(
            depth=depth, exception=record.exc_info
        ).log(level, record.getMessage())


def event_from_record(record: Record) -> LogEvent:
    """Convert a loguru record into a LogEvent.

    The target is the bound ``logger_name`` when present, else the module.
    """
    name = record['name']
    message = record['message']
    exc = record['exception']
    if exc is not None and exc.type is not None:
        message = message + '\n' + ''.join(
            traceback.format_exception(exc.type, exc.value, exc.traceback)).rstrip('\n')
    return LogEvent(
        level=Level.from_levelno(record['level'].no),
        message=message,
        target=record['extra'].get('logger_name') or name or '',
        module=name,
        file=record['file'].path if record['file'] else None,
        line=record['line'],
        time=record['time'],
    )


class LoguruBackend:
    """Loguru-based logging backend."""

    def __init__(self):
        self._sink_ids: list[int] = []

    def reset(self) -> None:
        """Remove all sinks and start fresh."""
        _loguru.remove()
        self._sink_ids.clear()

    def log(
        self,
        level: str,
        msg: str,
        *args,
        name: str | None = None,
        exc_info: bool = False,
        depth: int = 0,
        **kwargs,
    ) -> None:
        """Log a message at the given level."""
        bound = _loguru
        if name:
            bound = bound.bind(logger_name=name)

        opt_kwargs = {'depth': depth + 2}  # Correct caller frame
        if exc_info:
            opt_kwargs['exception'] = True

        bound.opt(**opt_kwargs).log(level, msg, *args, **kwargs)

    def add_sink(self, sink: Any, **kwargs) -> int:
        """Add a sink and return its ID."""
        sink_id = _loguru.add(sink, **kwargs)
        self._sink_ids.append(sink_id)
        return sink_id

    @property
    def sink_ids(self) -> list[int]:
        return list(self._sink_ids)


# Singleton backend instance
_backend: LoguruBackend | None = None


def get_backend() -> LoguruBackend:
    """Get the singleton backend instance."""
    global _backend
    if _backend is None:
        _backend = LoguruBackend()
    return _backend


def install(dispatcher: Dispatcher) -> int:
    """Replace every loguru sink with ``dispatcher``. Returns the sink ID.

    The dispatcher's ``enabled`` check is loguru's filter, so disabled
    records never reach the sink. Sink errors are not caught by loguru.
    loguru holds its own handler lock while calling the sink, so events
    logged through loguru are written one at a time; only direct
    ``Dispatcher.log`` calls write without a shared lock.
    """
    backend = get_backend()
    backend.reset()

    def sink(message: Message) -> None:
        dispatcher.log(event_from_record(message.record))

    def accept(record: Record) -> bool:
        return dispatcher.enabled(Level.from_levelno(record['level'].no), record['name'])

    sink_id = backend.add_sink(
        sink, level=0, format='{message}', filter=accept, colorize=False, catch=False,
    )
    _loguru.debug('Installed {!r} as sink {}', dispatcher, sink_id)
    return sink_id


def intercept_stdlib(logger_names: list[str] | None = None) -> None:
    """Set up stdlib logging interception.

    After calling this, logging.getLogger('name').info(...) will be
    routed through loguru.

    Args:
        logger_names: Specific logger names to intercept. If None,
                      intercepts the root logger (all loggers).
    """
    # Set up root logger interception
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)

    # Also intercept specific named loggers if provided
    if logger_names:
        for name in logger_names:
            stdlib_logger = logging.getLogger(name)
            stdlib_logger.handlers = [InterceptHandler()]
            stdlib_logger.propagate = False
            stdlib_logger.setLevel(logging.DEBUG)  # Let the dispatcher handle filtering
