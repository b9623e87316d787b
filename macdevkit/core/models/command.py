"""
ExitOutcome — what a finished child process looks like to the core.

The exit code is the only success signal. stdout/stderr are kept for
probes that read a value (e.g. ``git config user.name``) and for logs;
they are empty when the child inherited the terminal.
"""

from __future__ import annotations

from pydantic import BaseModel


class ExitOutcome(BaseModel):
    """Exit status and captured output of one command."""

    code: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.code == 0
