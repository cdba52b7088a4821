"""Dispatcher - filters events and renders them to every configured sink.

The compiled template, threshold and module filter are read-only after
construction and shared by all threads. Sink handles and style contexts are
per thread: each thread opens its own handle to every output on its first
log call and keeps it until the thread ends (or ``close()``), so writes
never contend for a lock.
"""
from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import BinaryIO

from fmtlog.colors import StyleContext
from fmtlog.config import Config
from fmtlog.event import LogEvent
from fmtlog.level import Level
from fmtlog.modules import ModuleFilter
from fmtlog.render import render
from fmtlog.sinks import Output, TextStreamSink
from fmtlog.template import Template, compile

__all__ = ['Dispatcher']


@dataclass
class _ThreadSink:
    """One thread's open handle to one output, with its own style state."""
    output: Output
    colorize: bool
    handle: BinaryIO | TextStreamSink
    context: StyleContext

    def close(self) -> None:
        # console handles belong to the interpreter
        if not self.output.is_console:
            self.handle.close()


class Dispatcher:
    """Formats and writes log events.

    Construction fails with CompileError if the format is malformed; a
    dispatcher with a partial template is never built.

    >>> from fmtlog import Config, Level
    >>> d = Dispatcher(Config(level='info', modules=['app']))
    >>> d.enabled(Level.Debug, 'app')
    False
    >>> d.enabled(Level.Error, 'other')
    False
    """

    def __init__(self, config: Config | None = None) -> None:
        config = config or Config()
        self._template = compile(config.format)
        self._level = config.level
        self._modules = ModuleFilter(config.modules)
        self._outputs = tuple((o, config.colorize.resolve(o)) for o in config.outputs)
        self._local = threading.local()

    @property
    def template(self) -> Template:
        return self._template

    @property
    def level(self) -> Level:
        return self._level

    @property
    def modules(self) -> ModuleFilter:
        return self._modules

    @property
    def outputs(self) -> tuple[tuple[Output, bool], ...]:
        """(output, colorize) pairs."""
        return self._outputs

    def enabled(self, level: Level, module: str | None = None) -> bool:
        """At least as severe as the threshold, and from an allowed module."""
        if level is Level.Off or level > self._level:
            return False
        return self._modules.contains(module)

    def log(self, event: LogEvent) -> None:
        """Render ``event`` once per sink. Sink OSErrors propagate."""
        module = event.module if event.module is not None else event.target
        if not self.enabled(event.level, module):
            return
        for sink in self._thread_sinks():
            render(self._template, event, sink.context, sink.colorize, sink.handle)

    def flush(self) -> None:
        """Flush the sinks this thread has opened. No-op for other threads."""
        for sink in getattr(self._local, 'sinks', None) or ():
            sink.handle.flush()

    def close(self) -> None:
        """Close this thread's file handles; they reopen on the next log call."""
        sinks = getattr(self._local, 'sinks', None) or ()
        self._local.sinks = None
        for sink in sinks:
            sink.close()

    def install(self) -> int:
        """Make this dispatcher loguru's single active sink."""
        from fmtlog._backend import install
        return install(self)

    def _thread_sinks(self) -> list[_ThreadSink]:
        sinks = getattr(self._local, 'sinks', None)
        if sinks is not None:
            return sinks
        sinks = []
        try:
            for output, colorize in self._outputs:
                sinks.append(_ThreadSink(output, colorize, output.open(), StyleContext()))
        except OSError:
            for sink in sinks:
                sink.close()
            raise
        self._local.sinks = sinks
        return sinks

    def __repr__(self) -> str:
        outputs = ', '.join(str(o) for o, _ in self._outputs)
        return f'Dispatcher(level={self._level.lower}, format={self._template.source!r}, outputs=[{outputs}])'


if __name__ == '__main__':
    __import__('doctest').testmod(optionflags=4 | 8 | 32)
