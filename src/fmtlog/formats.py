"""Preset format templates.

Colored presets degrade to plain text when colorization is off, so there is
a single set of names.

    >>> from fmtlog import formats
    >>> formats.SIMPLE2
    '[%F(red,yellow,green,purple,blue){%b{%L}}] %M\\n'
"""

__all__ = [
    'DEBUG1', 'DEBUG1_LOWER', 'DEBUG2', 'DEBUG2_LOWER',
    'DETAIL1', 'DETAIL1_LOWER', 'DETAIL2', 'DETAIL2_LOWER',
    'ENV_LOGGER', 'FLEXI_LOGGER', 'FLEXI_LOGGER2', 'PRETTY_ENV_LOGGER',
    'SIMPLE1', 'SIMPLE1_LOWER', 'SIMPLE2', 'SIMPLE2_LOWER',
    'SIMPLE_LOGGER', 'SIMPLELOG', 'STDERRLOG', 'STDERRLOG2',
    'TOML', 'YAML', 'get',
]

_LEVEL = '%F(red,yellow,green,purple,blue){%b{%L}}'
_LEVEL_LOWER = '%F(red,yellow,green,purple,blue){%b{%l}}'

SIMPLE1 = f'{_LEVEL}: %M\n'
SIMPLE1_LOWER = f'{_LEVEL_LOWER}: %M\n'

SIMPLE2 = f'[{_LEVEL}] %M\n'
SIMPLE2_LOWER = f'[{_LEVEL_LOWER}] %M\n'

DETAIL1 = f'[%T(%Y/%m/%d %T) %N] {_LEVEL}: %M\n'
DETAIL1_LOWER = f'[%T(%Y/%m/%d %T) %N] {_LEVEL_LOWER}: %M\n'

DETAIL2 = f'[{_LEVEL}] %M (at %T(%b %d %T) in %N)\n'
DETAIL2_LOWER = f'[{_LEVEL_LOWER}] %M (at %T(%b %d %T) in %N)\n'

DEBUG1 = f'[%N (%S)] {_LEVEL}: %M\n'
DEBUG1_LOWER = f'[%N (%S)] {_LEVEL_LOWER}: %M\n'

DEBUG2 = f'[{_LEVEL}] %M (at %S in %N)\n'
DEBUG2_LOWER = f'[{_LEVEL_LOWER}] %M (at %S in %N)\n'

TOML = '[%T(%+)]\ntarget = "%N"\nlevel = "%L"\ninfo = "%M"\n\n'
YAML = '- date: %T(%+)\n  target: %N\n  level: %L\n  info: %M\n\n'

# Look-alikes of other loggers' defaults
ENV_LOGGER = '%F(bright black){[}%U(%Y-%m-%dT%TZ) %F(red,yellow,green,blue,cyan){%L} %N%F(bright black){]} %M\n'
PRETTY_ENV_LOGGER = ' %F(red,yellow,green,blue,purple){%L} %b{%N} > %M\n'
FLEXI_LOGGER = '%F(red,yellow,white,white,black){%b{%L}} [%m] %F(red,yellow,white,white,black){%b{%M}}\n'
FLEXI_LOGGER2 = ('%F(red,yellow,white,white,black){%b{%T(%Y-%m-%d %T%.6f %:z) %L}} [%m] %S: '
                 '%F(red,yellow,white,white,black){%b{%M}}\n')
SIMPLE_LOGGER = '%T(%Y-%m-%d %T) %F(red,yellow,cyan,purple,white){%L} [%N] %M\n'
SIMPLELOG = '%T(%T) [%L] %M\n'
STDERRLOG = '%F(red,purple,yellow,cyan,blue){%L - %M}\n'
STDERRLOG2 = '%F(red,purple,yellow,cyan,blue){%T(%Y-%m-%dT%T%:z) - %L - %M}\n'


def get(name: str) -> str | None:
    """Look up a preset by name (case-insensitive), None if unknown."""
    key = name.upper()
    if key not in __all__:
        return None
    return globals()[key]
