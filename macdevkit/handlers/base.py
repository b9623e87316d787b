"""
Native handler base — the in-process fallback for each section.

Every handler follows the same shape:

    1. Probe   — is the tool already present / configured?
    2. Act     — if not, run a fixed install/configure command
    3. Report  — True once the end state is "present"

Handlers never prompt. Anything that would need input is turned into
instructions via ``ctx.note()``.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from macdevkit.adapters.base import CommandRunner
from macdevkit.core.context import HostContext
from macdevkit.core.errors import CommandSpawnError, HandlerActionFailure
from macdevkit.core.models.command import ExitOutcome
from macdevkit.core.models.section import Section

logger = logging.getLogger(__name__)


class SectionHandler(ABC):
    """Abstract base class for native section handlers.

    To create a new handler:
        1. Add a member to ``Section``
        2. Subclass SectionHandler and implement ``section`` and ``run``
        3. Register it in ``default_registry()``
    """

    @property
    @abstractmethod
    def section(self) -> Section:
        """The section this handler implements."""

    @abstractmethod
    def run(self, ctx: HostContext) -> bool:
        """Ensure the section's end state.

        Returns:
            True once the tool is present/configured.

        Raises:
            HandlerActionFailure: The acting command failed.
        """

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} section={self.section.value!r}>"


# ── Process helpers ─────────────────────────────────────────────


def probe(runner: CommandRunner, argv: list[str]) -> ExitOutcome | None:
    """Run a read-only query. Returns None if it could not be started."""
    try:
        return runner.run(argv, capture=True)
    except CommandSpawnError as e:
        logger.debug("Probe %s could not run: %s", argv, e.reason)
        return None


def command_exists(runner: CommandRunner, name: str) -> bool:
    """Whether ``name`` resolves to an executable on PATH."""
    outcome = probe(runner, ["which", name])
    return outcome is not None and outcome.ok


def act(section: Section, runner: CommandRunner, argv: list[str]) -> ExitOutcome:
    """Run an install/configure step on the user's terminal.

    Raises:
        HandlerActionFailure: The command could not start or exited non-zero.
    """
    logger.info("[%s] running %s", section.value, " ".join(argv))
    try:
        outcome = runner.run(argv, capture=False)
    except CommandSpawnError as e:
        raise HandlerActionFailure(section.value, str(e)) from e

    if not outcome.ok:
        raise HandlerActionFailure(
            section.value,
            f"{' '.join(argv)} exited with code {outcome.code}",
            exit_code=outcome.code,
        )
    return outcome


def fire_and_forget(runner: CommandRunner, argv: list[str]) -> bool:
    """Run a command whose failure must not affect the section.

    Used for preference writes and service restarts. Failures are
    swallowed and logged at debug level only. Returns whether it worked.
    """
    try:
        outcome = runner.run(argv, capture=True)
    except CommandSpawnError as e:
        logger.debug("Ignored: %s could not run: %s", argv, e.reason)
        return False
    if not outcome.ok:
        logger.debug("Ignored: %s exited %d %s", argv, outcome.code, outcome.stderr)
    return outcome.ok
