"""Centralized logging configuration for pocketbook.

Library modules only call ``get_logger("pocketbook.<module>")``; the CLI calls
``configure_logging`` once at startup to attach a single stderr handler to the
package root logger.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import IO

_PKG_LOGGER_NAME = "pocketbook"
_CONFIGURED = False

LOG_LEVEL_ENV_VAR = "POCKETBOOK_LOG_LEVEL"
DEFAULT_LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def parse_level(level: int | str | None) -> int:
    """Resolve a level given as int, level name or numeric string.

    ``None`` falls back to ``POCKETBOOK_LOG_LEVEL`` and then to WARNING.
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
        raise ValueError(f"Unknown log level: '{level}'")
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
    """Configure the package root logger exactly once.

    Args:
        level: Logging level as int or level name. Defaults to the
            POCKETBOOK_LOG_LEVEL environment variable, then WARNING.
        fmt: Optional format string for the handler.
        stream: Output stream for the handler (defaults to sys.stderr).
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    resolved = parse_level(level)
    logger = logging.getLogger(_PKG_LOGGER_NAME)

    for h in list(logger.handlers):
        if isinstance(h, logging.NullHandler):
            logger.removeHandler(h)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(resolved)
    handler.setFormatter(logging.Formatter(fmt or DEFAULT_LOG_FORMAT))

    logger.setLevel(resolved)
    logger.addHandler(handler)
    # Avoid double emission via the root logger.
    logger.propagate = False

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger, keeping the package silent until configured."""
    pkg_logger = logging.getLogger(_PKG_LOGGER_NAME)
    if not _CONFIGURED and not pkg_logger.handlers:
        pkg_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)
