"""
Error hierarchy for section dispatch.

Only three things can go wrong while running a section:

    - the script tier could not run at all (ScriptExecutionFailure)
    - the caller asked for a section that does not exist (UnknownSectionError)
    - a native handler's install/configure command failed (HandlerActionFailure)

Script-tier failures never reach the caller: the dispatcher catches them
and falls through to the native tier.
"""

from __future__ import annotations


class MacDevKitError(Exception):
    """Base class for all macdevkit errors."""


class ScriptExecutionFailure(MacDevKitError):
    """The script tier could not be used (spawn, write or permission error)."""


class ScriptResolutionError(ScriptExecutionFailure):
    """No runnable script could be located or synthesized."""


class CommandSpawnError(ScriptExecutionFailure):
    """A child process could not be started."""

    def __init__(self, argv: list[str], reason: str):
        self.argv = list(argv)
        self.reason = reason
        super().__init__(f"Failed to execute {argv[0] if argv else '?'}: {reason}")


class UnknownSectionError(MacDevKitError, ValueError):
    """The requested section name is not in the registry."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown section: '{name}'")


class HandlerActionFailure(MacDevKitError):
    """A native handler's acting command exited non-zero or could not run."""

    def __init__(self, section: str, message: str, exit_code: int | None = None):
        self.section = section
        self.exit_code = exit_code
        super().__init__(message)
