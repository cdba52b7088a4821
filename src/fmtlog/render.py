"""Template renderer.

Styling is not lexically scoped. One ``StyleContext`` is shared by the whole
walk: entering a region sets its channel, leaving it clears that channel
(the enclosing region's value is not restored). With colorization off the
walk emits the same text with no escape sequences.
"""
from __future__ import annotations

import datetime
import re
from typing import Protocol

from fmtlog.colors import ANSI_RESET, StyleContext
from fmtlog.event import LogEvent
from fmtlog.template import Background, Branch, Field, FieldKind, Foreground
from fmtlog.template import Literal, Region, Template, Toggle

__all__ = ['ByteSink', 'format_time', 'render', 'render_bytes']


class ByteSink(Protocol):
    def write(self, data: bytes) -> object: ...


def render(template: Template, event: LogEvent, context: StyleContext,
           colorize: bool, sink: ByteSink) -> None:
    """Render one event and write it to ``sink`` in a single write.

    Sink errors propagate unchanged.
    """
    sink.write(render_bytes(template, event, context, colorize))


def render_bytes(template: Template, event: LogEvent,
                 context: StyleContext | None = None,
                 colorize: bool = False) -> bytes:
    if context is None:
        context = StyleContext()
    context.reset()
    out: list[str] = []
    _walk(template, event, context, colorize, out)
    return ''.join(out).encode('utf-8')


def _walk(template: Template, event: LogEvent, context: StyleContext,
          colorize: bool, out: list[str]) -> None:
    for node in template.nodes:
        match node:
            case Literal(text=text):
                out.append(text)
            case Field():
                out.append(_field(node, event))
            case Region(effect=effect, body=body):
                _enter(effect, context)
                if colorize:
                    out.append(context.sgr())
                _walk(body, event, context, colorize, out)
                _leave(effect, context)
                if colorize:
                    out.append(ANSI_RESET)
                    out.append(context.sgr())
            case Branch():
                _walk(node.select(event.level), event, context, colorize, out)


def _enter(effect, context: StyleContext) -> None:
    match effect:
        case Foreground(color=color):
            context.fg = color
        case Background(color=color):
            context.bg = color
        case Toggle(style=style):
            context.flags |= style


def _leave(effect, context: StyleContext) -> None:
    match effect:
        case Foreground():
            context.fg = None
        case Background():
            context.bg = None
        case Toggle(style=style):
            context.flags &= ~style


def _field(field: Field, event: LogEvent) -> str:
    match field.kind:
        case FieldKind.MESSAGE:
            return event.text
        case FieldKind.LEVEL_UPPER:
            return event.level.upper
        case FieldKind.LEVEL_LOWER:
            return event.level.lower
        case FieldKind.TARGET:
            return event.target or ''
        case FieldKind.MODULE:
            return event.module or ''
        case FieldKind.FILE:
            return event.file or ''
        case FieldKind.FILE_LINE:
            if not event.file:
                return ''
            if event.line is None:
                return event.file
            return f'{event.file}:{event.line}'
        case FieldKind.LOCAL_TIME:
            return format_time(event.time.astimezone(), field.fmt or '')
        case FieldKind.UTC_TIME:
            return format_time(event.time.astimezone(datetime.timezone.utc), field.fmt or '')


_DIRECTIVE_RE = re.compile(r'%(\.[369]?f|:z|.)', re.DOTALL)


def _offset(dt: datetime.datetime) -> str:
    offset = dt.utcoffset() or datetime.timedelta(0)
    sign = '-' if offset < datetime.timedelta(0) else '+'
    minutes = abs(int(offset.total_seconds())) // 60
    return f'{sign}{minutes // 60:02d}:{minutes % 60:02d}'


def format_time(dt: datetime.datetime, fmt: str) -> str:
    """strftime with the chrono-style directives the preset formats use.

    Unknown directives are passed through. This never raises: a format the
    platform rejects is returned verbatim.

    >>> dt = datetime.datetime(2021, 1, 1, 12, 0, 0, 123456, datetime.timezone.utc)
    >>> format_time(dt, '%Y-%m-%d %T%.3f %:z')
    '2021-01-01 12:00:00.123 +00:00'
    """
    def translate(m: re.Match) -> str:
        match m.group(1):
            case '+':
                return dt.isoformat().replace('%', '%%')
            case '.f' | '.6f':
                return '.%f'
            case '.3f':
                return f'.{dt.microsecond // 1000:03d}'
            case '.9f':
                return f'.{dt.microsecond * 1000:09d}'
            case ':z':
                return _offset(dt)
            case 'T':
                return '%H:%M:%S'
            case _:
                return m.group(0)

    try:
        return dt.strftime(_DIRECTIVE_RE.sub(translate, fmt))
    except ValueError:
        return fmt


if __name__ == '__main__':
    __import__('doctest').testmod(optionflags=4 | 8 | 32)
