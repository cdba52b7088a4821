"""Logger facade - abstracts the underlying logging implementation.

Users interact with this module, never with loguru directly.
"""
from __future__ import annotations

from fmtlog.level import Level

__all__ = ['Logger', 'get_logger']


class Logger:
    """Logging facade - abstracts the underlying implementation.

    The name becomes the event target (``%N``); without a name the target
    is the calling module.
    """

    def __init__(self, name: str | None = None):
        self._name = name

    @property
    def name(self) -> str | None:
        return self._name

    def error(self, msg: str, *args, **kwargs) -> None:
        self._log(Level.Error, msg, args, kwargs)

    def warn(self, msg: str, *args, **kwargs) -> None:
        self._log(Level.Warn, msg, args, kwargs)

    def info(self, msg: str, *args, **kwargs) -> None:
        self._log(Level.Info, msg, args, kwargs)

    def debug(self, msg: str, *args, **kwargs) -> None:
        self._log(Level.Debug, msg, args, kwargs)

    def trace(self, msg: str, *args, **kwargs) -> None:
        self._log(Level.Trace, msg, args, kwargs)

    def exception(self, msg: str, *args, **kwargs) -> None:
        """Log error with exception info."""
        self._log(Level.Error, msg, args, kwargs, exc_info=True)

    def log(self, level: Level | str | int, msg: str, *args, **kwargs) -> None:
        self._log(Level.parse(level), msg, args, kwargs)

    # Aliases
    warning = warn
    critical = error

    def _log(self, level: Level, msg: str, args: tuple, kwargs: dict,
             exc_info: bool = False, depth: int = 0) -> None:
        from fmtlog._backend import get_backend, loguru_level
        get_backend().log(
            loguru_level(level), msg, *args,
            name=self._name,
            exc_info=exc_info,
            depth=depth + 1,  # Account for this wrapper
            **kwargs
        )

    def __repr__(self) -> str:
        return f'Logger(name={self._name!r})'


def get_logger(name: str | None = None) -> Logger:
    """Get a logger instance, optionally with a name.

    Args:
        name: Logger name (rendered by ``%N``)

    Returns
        Logger instance

    Examples
        >>> log = get_logger('database')
        >>> log.info('Query executed in {}ms', 12)  # doctest: +SKIP
    """
    return Logger(name=name)
