"""Sink descriptors - where rendered bytes go.

A descriptor is a plain value. Each thread calls ``open()`` itself and keeps
its own handle, so no lock is taken on write.
"""
from __future__ import annotations

import io
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, BinaryIO

from fmtlog.errors import ConfigError

if sys.platform == 'win32':
    import colorama
    colorama.just_fix_windows_console()

__all__ = ['Output', 'TextStreamSink']

STDOUT = 'stdout'
STDERR = 'stderr'
FILE = 'file'


class TextStreamSink:
    """Byte-sink adapter for a text stream without a ``buffer`` attribute.

    Used when stdout or stderr has been replaced by an object such as
    ``io.StringIO``. Bytes are decoded before they are written.
    """

    def __init__(self, stream: Any, encoding: str = 'utf-8') -> None:
        self.stream = stream
        self.encoding = encoding

    def write(self, data: bytes) -> int:
        self.stream.write(data.decode(self.encoding, errors='replace'))
        return len(data)

    def flush(self) -> None:
        self.stream.flush()


def _console(stream: Any) -> BinaryIO | TextStreamSink:
    buffer = getattr(stream, 'buffer', None)
    if buffer is not None:
        return buffer
    return TextStreamSink(stream)


@dataclass(frozen=True)
class Output:
    """Standard output, standard error, or a file opened in append mode."""
    stream: str = STDERR
    path: Path | None = None

    @classmethod
    def stdout(cls) -> Output:
        return cls(STDOUT)

    @classmethod
    def stderr(cls) -> Output:
        return cls(STDERR)

    @classmethod
    def file(cls, path: str | os.PathLike) -> Output:
        return cls(FILE, Path(path))

    @classmethod
    def parse(cls, value: Output | str | os.PathLike | dict) -> Output:
        """Build from a config value.

        Accepts ``'stdout'``, ``'stderr'``, a bare path, or a mapping such as
        ``{'stream': 'file', 'path': 'log.txt'}``.
        """
        if isinstance(value, Output):
            return value
        if isinstance(value, dict):
            stream = str(value.get('stream', STDERR)).lower()
            if stream == FILE:
                if not value.get('path'):
                    raise ConfigError('file output requires a path')
                return cls.file(value['path'])
            if stream in {STDOUT, STDERR}:
                return cls(stream)
            raise ConfigError(f'Invalid output stream: {stream!r}')
        if isinstance(value, os.PathLike):
            return cls.file(value)
        if isinstance(value, str):
            if value.lower() in {STDOUT, STDERR}:
                return cls(value.lower())
            if not value:
                raise ConfigError('Empty output path')
            return cls.file(value)
        raise ConfigError(f'Invalid output: {value!r}')

    @property
    def is_console(self) -> bool:
        return self.stream in {STDOUT, STDERR}

    def open(self) -> BinaryIO | TextStreamSink:
        """Open a new handle. Raises OSError if the file cannot be opened."""
        if self.stream == STDOUT:
            return _console(sys.stdout)
        if self.stream == STDERR:
            return _console(sys.stderr)
        # unbuffered so each rendered event is a single O_APPEND write
        return open(self.path, 'ab', buffering=0)

    def isatty(self) -> bool:
        """No need to colorize output to files or other processes."""
        if not self.is_console:
            return False
        stream = sys.stdout if self.stream == STDOUT else sys.stderr
        try:
            return stream.isatty()
        except (AttributeError, ValueError, io.UnsupportedOperation):
            return False

    def __str__(self) -> str:
        if self.is_console:
            return f'<{self.stream}>'
        return str(self.path)
