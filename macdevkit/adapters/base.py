"""
Command runner base — the protocol contract between handlers and the OS.

Every external process the core starts goes through a CommandRunner.
Handlers and the dispatcher never call ``subprocess`` directly, so a
stub runner can stand in for real installers in tests.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from macdevkit.core.models.command import ExitOutcome


class CommandRunner(ABC):
    """Abstract base class for process runners.

    Runners return an ExitOutcome for anything that ran, whatever its
    exit status. They raise CommandSpawnError only when the process
    could not be started at all.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """The runner identifier (e.g., 'subprocess', 'mock')."""

    @abstractmethod
    def run(self, argv: list[str], *, capture: bool = True) -> ExitOutcome:
        """Run ``argv`` to completion and report how it exited.

        Args:
            argv: Program and arguments. Never passed through a shell.
            capture: If True, collect stdout/stderr. If False, the child
                inherits the terminal (needed for installers and the
                automation script, which may prompt).

        Raises:
            CommandSpawnError: The program could not be executed.
        """

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
