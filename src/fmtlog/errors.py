"""Exception taxonomy for fmtlog.

Sink failures are not wrapped: the ``OSError`` raised by the underlying
stream propagates unchanged to the caller of ``log``/``flush``.
"""
from __future__ import annotations

__all__ = ['FmtlogError', 'CompileError', 'ConfigError']


class FmtlogError(Exception):
    """Base class for all fmtlog errors."""


class CompileError(FmtlogError, ValueError):
    """Format template text is malformed.

    The whole template is rejected, there is no partial result.
    """

    def __init__(self, message: str, position: int | None = None):
        self.message = message
        self.position = position
        if position is None:
            super().__init__(message)
        else:
            super().__init__(f'{message} (at position {position})')


class ConfigError(FmtlogError, ValueError):
    """Configuration text or values are malformed."""
