"""Adapters — process runners for external commands.

Public re-exports for convenient access.
"""

from macdevkit.adapters.base import CommandRunner
from macdevkit.adapters.mock import MockRunner
from macdevkit.adapters.shell.command import SubprocessRunner

__all__ = [
    "CommandRunner",
    "MockRunner",
    "SubprocessRunner",
]
