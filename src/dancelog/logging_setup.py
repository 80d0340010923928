"""Centralized logging configuration for the ``dancelog`` package.

- ``configure_logging(...)``: attach a single ``StreamHandler`` to the package
  root logger (``"dancelog"``). Called by the CLI entry point before any
  command runs.
- ``get_logger(name)``: acquire a logger by name, ensuring the package root
  logger has at least a ``NullHandler`` so library use stays silent.

Library modules never attach their own handlers.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import IO

PKG_LOGGER_NAME = "dancelog"
LOG_LEVEL_ENV_VAR = "DANCELOG_LOG_LEVEL"
DEFAULT_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"

_handler: logging.Handler | None = None


def parse_level(level: int | str | None) -> int:
    """Resolve a level given as int, name or numeric string.

    ``None`` falls back to ``DANCELOG_LOG_LEVEL`` and then ``WARNING``.
    """
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        level = level.strip().upper()
        if level.isdigit():
            return int(level)
        numeric = getattr(logging, level, None)
        if isinstance(numeric, int):
            return numeric
        raise ValueError(f"Unknown log level '{level}'")
    env_val = os.getenv(LOG_LEVEL_ENV_VAR)
    if env_val:
        return parse_level(env_val)
    return logging.WARNING


def configure_logging(
    level: int | str | None = None,
    *,
    fmt: str | None = None,
    stream: IO[str] | None = None,
) -> None:
    """Configure the package root logger.

    Calling it again replaces the handler installed by the previous call, so
    each CLI invocation writes to the current ``sys.stderr``.
    """
    global _handler

    logger = logging.getLogger(PKG_LOGGER_NAME)
    resolved = parse_level(level)

    for h in list(logger.handlers):
        if isinstance(h, logging.NullHandler) or h is _handler:
            logger.removeHandler(h)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(resolved)
    handler.setFormatter(logging.Formatter(fmt or DEFAULT_FORMAT))

    logger.setLevel(resolved)
    logger.addHandler(handler)
    _handler = handler


def get_logger(name: str) -> logging.Logger:
    """Return a logger by name, attaching a ``NullHandler`` to the package root if unconfigured."""
    pkg_logger = logging.getLogger(PKG_LOGGER_NAME)
    if not pkg_logger.handlers:
        pkg_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)
