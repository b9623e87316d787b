"""
Logging setup for the macdevkit CLI.

Installers write straight to the terminal, so the console handler stays
at WARNING unless a flag or ``MACDEVKIT_LOG_LEVEL`` asks for more.
``resolve_level`` folds the flags and the environment into one level;
``setup_logging`` installs the stderr handler and, when
``MACDEVKIT_LOG_FILE`` is set, a file handler with its own level.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping

ENV_LEVEL = "MACDEVKIT_LOG_LEVEL"
ENV_FILE = "MACDEVKIT_LOG_FILE"
ENV_FILE_LEVEL = "MACDEVKIT_LOG_FILE_LEVEL"

DEFAULT_LEVEL = logging.WARNING

# (threshold, format), first threshold the level reaches wins
_CONSOLE_FORMATS: list[tuple[int, str]] = [
    (logging.DEBUG, "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d %(message)s"),
    (logging.INFO, "%(asctime)s %(message)s"),
    (logging.CRITICAL, "%(levelname)s: %(message)s"),
]
_CONSOLE_DATEFMT = "%H:%M:%S"

_FILE_FORMAT = "%(asctime)s %(levelname)-5s [%(name)s] %(message)s"


def parse_level(name: str | None, default: int = DEFAULT_LEVEL) -> int:
    """Level name (any case) to its number; unknown or empty gives ``default``."""
    if not name:
        return default
    value = logging.getLevelName(name.strip().upper())
    return value if isinstance(value, int) else default


def resolve_level(
    *,
    debug: bool = False,
    verbose: bool = False,
    quiet: bool = False,
    environ: Mapping[str, str] | None = None,
) -> int:
    """Pick the console level: --debug > --verbose > --quiet > env > WARNING."""
    if debug:
        return logging.DEBUG
    if verbose:
        return logging.INFO
    if quiet:
        return logging.ERROR
    env = os.environ if environ is None else environ
    return parse_level(env.get(ENV_LEVEL))


def _console_format(level: int) -> str:
    for threshold, fmt in _CONSOLE_FORMATS:
        if level <= threshold:
            return fmt
    return _CONSOLE_FORMATS[-1][1]


def setup_logging(level: int, environ: Mapping[str, str] | None = None) -> None:
    """Install the process-wide handlers. Called once by the CLI."""
    env = os.environ if environ is None else environ

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console.setFormatter(logging.Formatter(_console_format(level), datefmt=_CONSOLE_DATEFMT))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(console)
    root_level = level

    log_file = env.get(ENV_FILE)
    if log_file:
        file_level = parse_level(env.get(ENV_FILE_LEVEL), default=level)
        handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setLevel(file_level)
        handler.setFormatter(logging.Formatter(_FILE_FORMAT))
        root.addHandler(handler)
        root_level = min(root_level, file_level)

    root.setLevel(root_level)
