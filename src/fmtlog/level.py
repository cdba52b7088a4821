"""Severity ordinal used for threshold comparisons.

More verbose levels compare greater: Off < Error < Warn < Info < Debug < Trace.
"""
from __future__ import annotations

import logging
from enum import IntEnum

from fmtlog.errors import ConfigError

__all__ = ['Level']


class Level(IntEnum):
    """Log level ordinal. ``Off`` is only meaningful as a threshold."""
    Off = 0
    Error = 1
    Warn = 2
    Info = 3
    Debug = 4
    Trace = 5

    @property
    def upper(self) -> str:
        return _UPPER[self]

    @property
    def lower(self) -> str:
        return _LOWER[self]

    def __str__(self) -> str:
        return self.upper

    @classmethod
    def parse(cls, value: Level | str | int) -> Level:
        """Parse a level name (any case), a Level, or an ordinal.

        >>> Level.parse('warn')
        <Level.Warn: 2>
        >>> Level.parse('WARNING')
        <Level.Warn: 2>
        """
        if isinstance(value, Level):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError:
                raise ConfigError(f'Invalid level: {value!r}') from None
        if isinstance(value, str):
            key = value.strip().lower()
            if key in _ALIASES:
                return _ALIASES[key]
        raise ConfigError(f'Invalid level: {value!r}')

    @classmethod
    def from_levelno(cls, levelno: int) -> Level:
        """Map a stdlib/loguru severity number onto the five event levels.

        >>> Level.from_levelno(logging.WARNING)
        <Level.Warn: 2>
        >>> Level.from_levelno(25)  # loguru SUCCESS
        <Level.Info: 3>
        """
        if levelno >= logging.ERROR:
            return cls.Error
        if levelno >= logging.WARNING:
            return cls.Warn
        if levelno >= logging.INFO:
            return cls.Info
        if levelno >= logging.DEBUG:
            return cls.Debug
        return cls.Trace


_UPPER = {
    Level.Off: 'OFF',
    Level.Error: 'ERROR',
    Level.Warn: 'WARN',
    Level.Info: 'INFO',
    Level.Debug: 'DEBUG',
    Level.Trace: 'TRACE',
}
_LOWER = {level: name.lower() for level, name in _UPPER.items()}

_ALIASES = {
    'off': Level.Off,
    'error': Level.Error,
    'critical': Level.Error,
    'fatal': Level.Error,
    'warn': Level.Warn,
    'warning': Level.Warn,
    'info': Level.Info,
    'success': Level.Info,
    'debug': Level.Debug,
    'trace': Level.Trace,
    'max': Level.Trace,
}


if __name__ == '__main__':
    __import__('doctest').testmod(optionflags=4 | 8 | 32)
