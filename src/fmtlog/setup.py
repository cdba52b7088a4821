"""One-call logging setup - build a Dispatcher and install it.
"""
from __future__ import annotations

import os
from typing import Any

from loguru import logger as _loguru

from fmtlog._backend import install, intercept_stdlib
from fmtlog.config import Config
from fmtlog.dispatcher import Dispatcher

__all__ = ['configure_logging']


def configure_logging(
    config: Config | dict[str, Any] | None = None,
    path: str | os.PathLike | None = None,
    intercept: list[str] | bool = True,
    environ: dict[str, str] | None = None,
) -> Dispatcher:
    """Configure logging for any application.

    Args:
        config: Config object or mapping; defaults when omitted
        path: JSON, YAML or TOML file to load instead of ``config``
        intercept: True routes the stdlib root logger through the dispatcher,
                   a list also intercepts those named loggers, False skips it
        environ: Environment used for FMTLOG_* overrides (os.environ by default)

    Returns
        The installed Dispatcher

    Raises
        ConfigError: malformed configuration
        CompileError: malformed format template
    """
    if path is not None:
        config = Config.from_file(path)
    elif isinstance(config, dict):
        config = Config.from_dict(config)
    config = (config or Config()).with_env(environ)

    dispatcher = Dispatcher(config)
    install(dispatcher)

    if intercept:
        intercept_stdlib(intercept if isinstance(intercept, list) else None)

    _loguru.debug('Logging configured: level={} modules={} outputs={}',
                  config.level.lower, config.modules, [str(o) for o in config.outputs])
    return dispatcher
