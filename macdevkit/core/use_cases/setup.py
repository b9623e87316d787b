"""
Full setup use case — every section, in order, each behind a confirmation.

A failed section is recorded and the run moves on to the next one.
Declined sections are recorded as skipped. Nothing runs in parallel.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from macdevkit.adapters.base import CommandRunner
from macdevkit.core.engine.dispatcher import SectionDispatcher
from macdevkit.core.errors import CommandSpawnError
from macdevkit.core.models.section import Section, SectionResult

logger = logging.getLogger(__name__)

RESTART_COMMAND = ["sudo", "shutdown", "-r", "now"]


@dataclass
class SetupReport:
    """Result of a full setup run."""

    results: list[SectionResult] = field(default_factory=list)
    skipped: list[Section] = field(default_factory=list)

    @property
    def succeeded(self) -> int:
        return sum(1 for r in self.results if r.ok)

    @property
    def failed(self) -> int:
        return sum(1 for r in self.results if r.failed)

    @property
    def status(self) -> str:
        if not self.results or self.failed == 0:
            return "ok"
        if self.succeeded == 0:
            return "failed"
        return "partial"

    def to_dict(self) -> dict:
        return {
            "status": self.status,
            "succeeded": self.succeeded,
            "failed": self.failed,
            "skipped": [s.value for s in self.skipped],
            "results": [r.to_dict() for r in self.results],
        }


def run_full_setup(
    dispatcher: SectionDispatcher,
    confirm: Callable[[Section], bool],
    on_start: Callable[[Section], None] | None = None,
    on_result: Callable[[SectionResult], None] | None = None,
) -> SetupReport:
    """Run every section the user confirms, strictly one after another.

    Args:
        dispatcher: Dispatcher to run sections with.
        confirm: Asked before each section; False skips it.
        on_start: Called right before a confirmed section runs.
        on_result: Called with each section's result as soon as it is known.

    Returns:
        SetupReport with one entry per section.
    """
    report = SetupReport()

    for section in Section:
        if not confirm(section):
            logger.info("Skipping %s (declined)", section.value)
            report.skipped.append(section)
            continue

        if on_start:
            on_start(section)
        result = dispatcher.run_section(section.value)
        if result.failed:
            logger.warning("%s failed: %s", section.value, result.error)
        report.results.append(result)
        if on_result:
            on_result(result)

    logger.info(
        "Setup finished: %d ok, %d failed, %d skipped",
        report.succeeded,
        report.failed,
        len(report.skipped),
    )
    return report


def restart_host(runner: CommandRunner) -> bool:
    """Reboot the machine. Returns False if the command could not run."""
    try:
        return runner.run(RESTART_COMMAND, capture=False).ok
    except CommandSpawnError as e:
        logger.error("Restart failed: %s", e)
        return False
