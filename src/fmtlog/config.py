"""Logger configuration - declarative dataclass plus text loaders.

Text configuration (JSON, YAML or TOML) looks like::

    colorize = "auto"
    level = "info"
    modules = ["app", "lib::db"]
    format = "SIMPLE2"

    [output]
    stream = "file"
    path = "log.txt"

Environment variables override any source:

    FMTLOG_LEVEL      off, error, warn, info, debug, trace
    FMTLOG_MODULES    comma separated module prefixes
    FMTLOG_COLORIZE   on, auto, off
    FMTLOG_FORMAT     template text or preset name
"""
from __future__ import annotations

import json
import os
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from enum import StrEnum
from pathlib import Path
from typing import Any

import yaml

from fmtlog import formats
from fmtlog.errors import ConfigError
from fmtlog.level import Level
from fmtlog.sinks import Output

__all__ = ['Colorize', 'Config']

ENV_LEVEL = 'FMTLOG_LEVEL'
ENV_MODULES = 'FMTLOG_MODULES'
ENV_COLORIZE = 'FMTLOG_COLORIZE'
ENV_FORMAT = 'FMTLOG_FORMAT'

_KNOWN_KEYS = {'level', 'modules', 'output', 'outputs', 'colorize', 'format'}


class Colorize(StrEnum):
    """Whether to emit ANSI styling."""
    OFF = 'off'
    AUTO = 'auto'
    ON = 'on'

    @classmethod
    def parse(cls, value: Colorize | str | bool) -> Colorize:
        if isinstance(value, Colorize):
            return value
        if isinstance(value, bool):
            return cls.ON if value else cls.OFF
        key = str(value).strip().lower()
        if key in {'true', 'yes', '1'}:
            return cls.ON
        if key in {'false', 'no', '0'}:
            return cls.OFF
        try:
            return cls(key)
        except ValueError:
            raise ConfigError(f'Invalid colorize value: {value!r}') from None

    def resolve(self, output: Output) -> bool:
        """Decide for one output. Auto colors terminals only."""
        if self is Colorize.AUTO:
            return output.isatty()
        return self is Colorize.ON


def _resolve_format(value: str) -> str:
    """Preset name or literal template text."""
    if '%' in value:
        return value
    return formats.get(value) or value


@dataclass
class Config:
    """Declarative logger configuration."""
    level: Level = Level.Info
    modules: list[str] = field(default_factory=list)
    outputs: list[Output] = field(default_factory=lambda: [Output.stderr()])
    colorize: Colorize = Colorize.AUTO
    format: str = formats.SIMPLE1

    def __post_init__(self):
        self.level = Level.parse(self.level)
        if not isinstance(self.format, str):
            raise ConfigError('format must be a string')
        self.format = _resolve_format(self.format)
        self.colorize = Colorize.parse(self.colorize)
        self.outputs = [Output.parse(o) for o in self.outputs]
        self.modules = list(self.modules)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Config:
        """Build from an already-parsed mapping. Unknown keys are an error."""
        if not isinstance(data, Mapping):
            raise ConfigError(f'Configuration must be a mapping, got {type(data).__name__}')
        unknown = set(data) - _KNOWN_KEYS
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")

        kwargs: dict[str, Any] = {}
        if 'level' in data:
            kwargs['level'] = data['level']
        if 'colorize' in data:
            kwargs['colorize'] = data['colorize']
        if 'format' in data:
            kwargs['format'] = data['format']
        if 'modules' in data:
            modules = data['modules']
            if isinstance(modules, str) or not isinstance(modules, list):
                raise ConfigError('modules must be a list of strings')
            kwargs['modules'] = [str(m) for m in modules]
        outputs = data.get('outputs', data.get('output'))
        if outputs is not None:
            if not isinstance(outputs, list):
                outputs = [outputs]
            kwargs['outputs'] = outputs
        return cls(**kwargs)

    @classmethod
    def from_json(cls, text: str) -> Config:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ConfigError(f'Invalid JSON configuration: {exc}') from exc
        return cls.from_dict(data)

    @classmethod
    def from_yaml(cls, text: str) -> Config:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ConfigError(f'Invalid YAML configuration: {exc}') from exc
        return cls.from_dict(data or {})

    @classmethod
    def from_toml(cls, text: str) -> Config:
        try:
            data = tomllib.loads(text)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f'Invalid TOML configuration: {exc}') from exc
        return cls.from_dict(data)

    @classmethod
    def from_file(cls, path: str | os.PathLike) -> Config:
        """Load by file suffix (.json, .yaml/.yml, .toml)."""
        path = Path(path)
        loaders = {
            '.json': cls.from_json,
            '.yaml': cls.from_yaml,
            '.yml': cls.from_yaml,
            '.toml': cls.from_toml,
        }
        loader = loaders.get(path.suffix.lower())
        if loader is None:
            raise ConfigError(f'Unsupported configuration file type: {path.suffix!r}')
        return loader(path.read_text(encoding='utf-8'))

    def with_env(self, environ: Mapping[str, str] | None = None) -> Config:
        """Return a copy with FMTLOG_* environment overrides applied."""
        environ = os.environ if environ is None else environ
        changes: dict[str, Any] = {}
        if environ.get(ENV_LEVEL):
            changes['level'] = Level.parse(environ[ENV_LEVEL])
        if environ.get(ENV_MODULES):
            changes['modules'] = [m.strip() for m in environ[ENV_MODULES].split(',') if m.strip()]
        if environ.get(ENV_COLORIZE):
            changes['colorize'] = Colorize.parse(environ[ENV_COLORIZE])
        if environ.get(ENV_FORMAT):
            changes['format'] = environ[ENV_FORMAT]
        return replace(self, **changes)
