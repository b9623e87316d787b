"""
Subprocess runner — execute commands on the real host.

This is the single place where ``subprocess.run`` is called. Calls
block until the child exits; there is no timeout.
"""

from __future__ import annotations

import logging
import subprocess
import time

from macdevkit.adapters.base import CommandRunner
from macdevkit.core.errors import CommandSpawnError
from macdevkit.core.models.command import ExitOutcome

logger = logging.getLogger(__name__)


class SubprocessRunner(CommandRunner):
    """Run commands with :func:`subprocess.run`.

    Args:
        env: Optional environment for children (default: inherit).
    """

    def __init__(self, env: dict[str, str] | None = None):
        self._env = env

    @property
    def name(self) -> str:
        return "subprocess"

    def run(self, argv: list[str], *, capture: bool = True) -> ExitOutcome:
        logger.debug("Executing: %s (capture=%s)", argv, capture)
        start = time.monotonic()

        try:
            result = subprocess.run(
                argv,
                capture_output=capture,
                text=True,
                env=self._env,
            )
        except OSError as e:
            logger.debug("Spawn failed for %s: %s", argv, e)
            raise CommandSpawnError(argv, str(e)) from e

        elapsed_ms = int((time.monotonic() - start) * 1000)
        logger.debug("%s exited %d after %dms", argv[0], result.returncode, elapsed_ms)

        return ExitOutcome(
            code=result.returncode,
            stdout=(result.stdout or "").strip() if capture else "",
            stderr=(result.stderr or "").strip() if capture else "",
        )
