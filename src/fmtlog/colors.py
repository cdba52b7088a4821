"""Color and style values, and the ANSI sequences that express them.

Named colors use colorama's SGR code table. RGB colors use the 24-bit
``38;2;r;g;b`` / ``48;2;r;g;b`` forms.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Flag, auto

from colorama import Style as _AnsiReset
from colorama.ansi import CSI, AnsiBack, AnsiFore, AnsiStyle

from fmtlog.errors import CompileError

__all__ = [
    'ANSI_RESET',
    'COLOR_NAMES',
    'Color',
    'Style',
    'StyleContext',
]

ANSI_RESET = _AnsiReset.RESET_ALL

# name -> colorama attribute
_BASE = {
    'black': 'BLACK',
    'red': 'RED',
    'green': 'GREEN',
    'yellow': 'YELLOW',
    'blue': 'BLUE',
    'magenta': 'MAGENTA',
    'purple': 'MAGENTA',
    'cyan': 'CYAN',
    'white': 'WHITE',
}
_NAMED = {**_BASE, **{f'bright {k}': f'LIGHT{v}_EX' for k, v in _BASE.items()}}

COLOR_NAMES = frozenset(_NAMED)

_HEX_RE = re.compile(r'#([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})')


@dataclass(frozen=True)
class Color:
    """A named terminal color or a 24-bit RGB triple.

    Exactly one of ``name`` and ``rgb`` is set.
    """
    name: str | None = None
    rgb: tuple[int, int, int] | None = None

    @classmethod
    def parse(cls, text: str) -> Color:
        """Parse ``#RRGGBB`` or one of the fixed color names (case-sensitive).

        >>> Color.parse('#ff0000')
        Color(name=None, rgb=(255, 0, 0))
        >>> Color.parse('bright black')
        Color(name='bright black', rgb=None)
        """
        if text.startswith('#'):
            m = _HEX_RE.fullmatch(text)
            if not m:
                raise CompileError(f'invalid color {text!r}')
            return cls(rgb=tuple(int(g, 16) for g in m.groups()))
        if text not in _NAMED:
            raise CompileError(f'invalid color {text!r}')
        if text.endswith('purple'):
            text = text.replace('purple', 'magenta')
        return cls(name=text)

    def fg_param(self) -> str:
        """SGR parameter selecting this color as foreground."""
        if self.rgb is not None:
            return '38;2;{};{};{}'.format(*self.rgb)
        return str(getattr(AnsiFore, _NAMED[self.name]))

    def bg_param(self) -> str:
        """SGR parameter selecting this color as background."""
        if self.rgb is not None:
            return '48;2;{};{};{}'.format(*self.rgb)
        return str(getattr(AnsiBack, _NAMED[self.name]))


class Style(Flag):
    """Independent text attributes."""
    BOLD = auto()
    DIM = auto()
    ITALIC = auto()
    REVERSE = auto()
    UNDERLINE = auto()
    STRIKETHROUGH = auto()


_STYLE_PARAMS = (
    (Style.BOLD, AnsiStyle.BRIGHT),
    (Style.DIM, AnsiStyle.DIM),
    (Style.ITALIC, 3),
    (Style.UNDERLINE, 4),
    (Style.REVERSE, 7),
    (Style.STRIKETHROUGH, 9),
)


@dataclass
class StyleContext:
    """Mutable current style consulted while rendering.

    ``None`` for a color means unset (terminal default), never black/white.
    """
    fg: Color | None = None
    bg: Color | None = None
    flags: Style = field(default_factory=lambda: Style(0))

    def reset(self) -> None:
        self.fg = None
        self.bg = None
        self.flags = Style(0)

    @property
    def neutral(self) -> bool:
        return self.fg is None and self.bg is None and not self.flags

    def sgr(self) -> str:
        """One escape sequence expressing the whole context, '' if neutral.

        >>> StyleContext(fg=Color.parse('red'), flags=Style.BOLD).sgr()
        '\\x1b[1;31m'
        """
        params = [str(code) for flag, code in _STYLE_PARAMS if flag in self.flags]
        if self.fg is not None:
            params.append(self.fg.fg_param())
        if self.bg is not None:
            params.append(self.bg.bg_param())
        if not params:
            return ''
        return f"{CSI}{';'.join(params)}m"


if __name__ == '__main__':
    __import__('doctest').testmod(optionflags=4 | 8 | 32)
