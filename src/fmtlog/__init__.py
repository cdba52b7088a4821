"""Formatted logging with a small template language and loguru backend.

Public API - users should only import from this module.

Usage:
    import fmtlog

    # Configure and install in one call
    fmtlog.configure_logging({'level': 'debug', 'format': '[%L] %M\\n'})

    # Module-level logging
    fmtlog.info('Application started')
    fmtlog.error('Something failed: {}', reason)

    # Named loggers (rendered by %N)
    db_logger = fmtlog.get_logger('database')
    db_logger.debug('Query executed')

    # Or build a dispatcher and drive it directly
    dispatcher = fmtlog.new(fmtlog.Config(format=fmtlog.formats.SIMPLE2))
    dispatcher.log(fmtlog.LogEvent(fmtlog.Level.Info, 'hello'))

    # stdlib logging still works (intercepted)
    import logging
    logging.getLogger('web').info('This also works!')
"""
from loguru import logger as _loguru

from fmtlog import formats
from fmtlog._logger import Logger, get_logger
from fmtlog.colors import Color, Style, StyleContext
from fmtlog.config import Colorize, Config
from fmtlog.dispatcher import Dispatcher
from fmtlog.errors import CompileError, ConfigError, FmtlogError
from fmtlog.event import LogEvent
from fmtlog.level import Level
from fmtlog.modules import ModuleFilter
from fmtlog.render import render, render_bytes
from fmtlog.setup import configure_logging
from fmtlog.sinks import Output
from fmtlog.template import Template, compile

# Library diagnostics stay silent unless the application opts in
_loguru.disable('fmtlog')


def new(config: Config | None = None) -> Dispatcher:
    """Create a dispatcher from custom settings."""
    return Dispatcher(config)


def default() -> Dispatcher:
    """Create a dispatcher from default settings."""
    return Dispatcher(Config())


def from_json(text: str) -> Dispatcher:
    return Dispatcher(Config.from_json(text))


def from_yaml(text: str) -> Dispatcher:
    return Dispatcher(Config.from_yaml(text))


def from_toml(text: str) -> Dispatcher:
    return Dispatcher(Config.from_toml(text))


# Module-level logger instance
_module_logger: Logger | None = None


def _get_module_logger() -> Logger:
    """Get the module-level logger instance."""
    global _module_logger
    if _module_logger is None:
        _module_logger = Logger()
    return _module_logger


# Module-level convenience functions
def error(msg: str, *args, **kwargs) -> None:
    """Log an error message."""
    _get_module_logger()._log(Level.Error, msg, args, kwargs)


def warn(msg: str, *args, **kwargs) -> None:
    """Log a warning message."""
    _get_module_logger()._log(Level.Warn, msg, args, kwargs)


def info(msg: str, *args, **kwargs) -> None:
    """Log an info message."""
    _get_module_logger()._log(Level.Info, msg, args, kwargs)


def debug(msg: str, *args, **kwargs) -> None:
    """Log a debug message."""
    _get_module_logger()._log(Level.Debug, msg, args, kwargs)


def trace(msg: str, *args, **kwargs) -> None:
    """Log a trace message."""
    _get_module_logger()._log(Level.Trace, msg, args, kwargs)


def exception(msg: str, *args, **kwargs) -> None:
    """Log an error message with exception info."""
    _get_module_logger()._log(Level.Error, msg, args, kwargs, exc_info=True)


# Aliases
warning = warn


__all__ = [
    # Configuration
    'configure_logging',
    'Config',
    'Colorize',
    'Output',
    'Level',
    'formats',
    # Dispatcher
    'Dispatcher',
    'new',
    'default',
    'from_json',
    'from_yaml',
    'from_toml',
    'LogEvent',
    'ModuleFilter',
    # Templates
    'compile',
    'Template',
    'render',
    'render_bytes',
    'Color',
    'Style',
    'StyleContext',
    # Logger access
    'get_logger',
    'Logger',
    # Logging methods
    'error',
    'warn',
    'warning',
    'info',
    'debug',
    'trace',
    'exception',
    # Errors
    'FmtlogError',
    'CompileError',
    'ConfigError',
]
