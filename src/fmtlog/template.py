"""Format template compiler.

A template string is compiled once into an immutable tree of nodes:

    Literal   verbatim text
    Field     a value taken from the event (message, level, target, ...)
    Region    a nested template rendered under a styling effect
    Branch    five alternative templates, one per event level

Codes (introduced by ``%``)::

    %%  %}        literal ``%`` / ``}``
    %M            message
    %l  %L        level, lower / upper case
    %N            target (logger name, defaults to the module path)
    %m            module path
    %f  %S        source file / file:line
    %T(fmt)       local time, strftime-style ``fmt``
    %U(fmt)       UTC time
    %F(c){..}     foreground color for the body
    %F(e,w,i,d,t){..}   foreground color chosen by level
    %B(..){..}    background color, same two forms
    %b %d %i %r %u %s {..}   bold, dim, italic, reverse, underline, strikethrough

Nested bodies are parsed by recursive descent, so a literal ``}`` inside a
body must be written ``%}``.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from fmtlog.colors import Color, Style
from fmtlog.errors import CompileError
from fmtlog.level import Level

__all__ = [
    'Background',
    'Branch',
    'Field',
    'FieldKind',
    'Foreground',
    'Literal',
    'Node',
    'Region',
    'Template',
    'Toggle',
    'compile',
]


class FieldKind(Enum):
    MESSAGE = 'M'
    LEVEL_LOWER = 'l'
    LEVEL_UPPER = 'L'
    TARGET = 'N'
    MODULE = 'm'
    FILE = 'f'
    FILE_LINE = 'S'
    LOCAL_TIME = 'T'
    UTC_TIME = 'U'

    @property
    def is_time(self) -> bool:
        return self in {FieldKind.LOCAL_TIME, FieldKind.UTC_TIME}


@dataclass(frozen=True)
class Literal:
    text: str


@dataclass(frozen=True)
class Field:
    kind: FieldKind
    fmt: str | None = None


@dataclass(frozen=True)
class Foreground:
    color: Color


@dataclass(frozen=True)
class Background:
    color: Color


@dataclass(frozen=True)
class Toggle:
    style: Style


Effect = Foreground | Background | Toggle


@dataclass(frozen=True)
class Region:
    effect: Effect
    body: Template


@dataclass(frozen=True)
class Branch:
    """Alternatives in Error, Warn, Info, Debug, Trace order."""
    arms: tuple[Template, Template, Template, Template, Template]

    def select(self, level: Level) -> Template:
        return self.arms[max(level, Level.Error) - 1]


Node = Literal | Field | Region | Branch


@dataclass(frozen=True)
class Template:
    """Compiled format. Holds no event or thread state."""
    nodes: tuple[Node, ...] = ()
    source: str = ''


_FIELDS = {kind.value: kind for kind in FieldKind if not kind.is_time}
_TIMES = {'T': FieldKind.LOCAL_TIME, 'U': FieldKind.UTC_TIME}
_TOGGLES = {
    'b': Style.BOLD,
    'd': Style.DIM,
    'i': Style.ITALIC,
    'r': Style.REVERSE,
    'u': Style.UNDERLINE,
    's': Style.STRIKETHROUGH,
}
_COLORS = {'F': Foreground, 'B': Background}


class _Cursor:
    """Character cursor shared by every level of the recursive parse."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    def next(self) -> str | None:
        if self.pos >= len(self.text):
            return None
        ch = self.text[self.pos]
        self.pos += 1
        return ch

    def expect(self, ch: str, message: str) -> None:
        got = self.next()
        if got is None:
            raise CompileError('unexpected end of input', self.pos)
        if got != ch:
            raise CompileError(message, self.pos - 1)

    def take_until(self, ch: str) -> str:
        start = self.pos
        end = self.text.find(ch, start)
        if end < 0:
            self.pos = len(self.text)
            raise CompileError('unexpected end of input', self.pos)
        self.pos = end + 1
        return self.text[start:end]


def compile(text: str) -> Template:
    """Compile template text, raising CompileError on any malformation.

    >>> compile('[%L] %M').nodes
    (Literal(text='['), Field(kind=<FieldKind.LEVEL_UPPER: 'L'>, fmt=None), Literal(text='] '), Field(kind=<FieldKind.MESSAGE: 'M'>, fmt=None))
    """
    cursor = _Cursor(text)
    return Template(_parse(cursor, nested=False), text)


def _parse(cursor: _Cursor, nested: bool) -> tuple[Node, ...]:
    nodes: list[Node] = []
    run: list[str] = []

    def flush_run():
        if run:
            nodes.append(Literal(''.join(run)))
            run.clear()

    while True:
        ch = cursor.next()
        if ch is None:
            if nested:
                raise CompileError('unexpected end of input: unterminated body', cursor.pos)
            break
        if nested and ch == '}':
            break
        if ch != '%':
            run.append(ch)
            continue
        code = cursor.next()
        if code is None:
            raise CompileError('unexpected end of input', cursor.pos)
        if code in '%}':
            run.append(code)
            continue
        flush_run()
        nodes.append(_parse_code(code, cursor))

    flush_run()
    return tuple(nodes)


def _parse_code(code: str, cursor: _Cursor) -> Node:
    if code in _FIELDS:
        return Field(_FIELDS[code])
    if code in _TIMES:
        cursor.expect('(', 'missing argument')
        return Field(_TIMES[code], cursor.take_until(')'))
    if code in _COLORS:
        return _parse_color(_COLORS[code], cursor)
    if code in _TOGGLES:
        return Region(Toggle(_TOGGLES[code]), _parse_body(cursor))
    raise CompileError(f'unknown specifier {code!r}', cursor.pos - 1)


def _parse_body(cursor: _Cursor) -> Template:
    start = cursor.pos
    cursor.expect('{', 'missing body')
    nodes = _parse(cursor, nested=True)
    return Template(nodes, cursor.text[start + 1:cursor.pos - 1])


def _parse_color(effect: type[Foreground] | type[Background], cursor: _Cursor) -> Node:
    cursor.expect('(', 'missing argument')
    start = cursor.pos
    specs = cursor.take_until(')').split(',')
    try:
        colors = [Color.parse(spec.strip()) for spec in specs]
    except CompileError as exc:
        raise CompileError(exc.message, start) from None
    if len(colors) not in {1, 5}:
        raise CompileError(
            f'missing argument: expected 1 or 5 colors, got {len(colors)}', start)
    body = _parse_body(cursor)
    if len(colors) == 1:
        return Region(effect(colors[0]), body)
    return Branch(tuple(Template((Region(effect(c), body),)) for c in colors))


if __name__ == '__main__':
    __import__('doctest').testmod(optionflags=4 | 8 | 32)
