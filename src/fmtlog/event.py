"""The per-message event rendered by a template."""
from __future__ import annotations

import datetime
from dataclasses import dataclass, field
from functools import cached_property
from typing import Any

from fmtlog.level import Level

__all__ = ['LogEvent']


def _now() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


@dataclass
class LogEvent:
    """One log call.

    The message text is formatted lazily with ``str.format`` semantics, so a
    disabled event never pays for formatting.

    A message whose placeholders do not match its arguments raises the
    ``KeyError``, ``IndexError`` or ``ValueError`` from ``str.format`` when
    the event is rendered, as loguru does.

    >>> LogEvent(Level.Info, 'hello {}', args=('world',)).text
    'hello world'
    """
    level: Level
    message: Any
    args: tuple = ()
    kwargs: dict = field(default_factory=dict)
    target: str = ''
    module: str | None = None
    file: str | None = None
    line: int | None = None
    time: datetime.datetime = field(default_factory=_now)

    def __post_init__(self):
        if not self.target and self.module:
            self.target = self.module

    @cached_property
    def text(self) -> str:
        if self.args or self.kwargs:
            return str(self.message).format(*self.args, **self.kwargs)
        return str(self.message)


if __name__ == '__main__':
    __import__('doctest').testmod(optionflags=4 | 8 | 32)
