"""
Section dispatcher — script tier first, native tier second.

This is the single entry point the CLI uses to run a section:

    1. Parse the name (unknown names raise before anything runs)
    2. Resolve the automation script (packaged or degraded)
    3. If the script still exists, run ``<script> <section>``; exit 0 wins
    4. Otherwise (missing, unspawnable, non-zero) run the native handler
    5. Normalize the outcome into a SectionResult

Each tier gets exactly one attempt. Success is the exit status or the
handler's return value; nothing is inferred from output.
"""

from __future__ import annotations

import logging
import time

from macdevkit.adapters.base import CommandRunner
from macdevkit.core.config.loader import Settings
from macdevkit.core.context import HostContext, detect_host
from macdevkit.core.errors import (
    CommandSpawnError,
    HandlerActionFailure,
    ScriptResolutionError,
    UnknownSectionError,
)
from macdevkit.core.models.section import Section, SectionResult
from macdevkit.core.services.script_resolver import ScriptReference, ScriptResolver
from macdevkit.handlers.registry import HandlerRegistry, default_registry

logger = logging.getLogger(__name__)


class SectionDispatcher:
    """Run sections through the script → native fallback chain.

    Args:
        host: Host context handed to native handlers.
        resolver: Script resolver, consulted fresh on every run.
        registry: Native handlers by section.
    """

    def __init__(
        self,
        host: HostContext,
        resolver: ScriptResolver,
        registry: HandlerRegistry,
    ):
        self.host = host
        self.resolver = resolver
        self.registry = registry

    def run_section(self, name: str) -> SectionResult:
        """Run one section by name.

        Returns:
            SectionResult; failures are captured, not raised.

        Raises:
            UnknownSectionError: No section (or no handler) by that name.
        """
        section = Section.parse(name)
        start = time.monotonic()

        if self._run_script_tier(section):
            return SectionResult.success(
                section,
                tier="script",
                duration_ms=_elapsed_ms(start),
            )

        result = self._run_native_tier(section)
        result.duration_ms = _elapsed_ms(start)
        return result

    # ── Script tier ─────────────────────────────────────────────

    def _resolve(self) -> ScriptReference | None:
        try:
            return self.resolver.resolve()
        except ScriptResolutionError as e:
            logger.warning("No script available: %s", e)
            return None

    def _run_script_tier(self, section: Section) -> bool:
        """Try the script once. True only if it ran and exited 0."""
        ref = self._resolve()
        if ref is None:
            return False

        try:
            # re-check: the file may have been removed since resolution
            if not ref.exists():
                logger.info("Script %s disappeared, using native handler", ref.path)
                return False

            logger.info("[%s] running script %s", section.value, ref.path)
            try:
                outcome = self.host.runner.run([str(ref.path), section.value], capture=False)
            except CommandSpawnError as e:
                logger.warning("Script tier failed for %s: %s", section.value, e)
                return False

            if outcome.ok:
                return True
            # the minimal script exits 1 for every section it does not know
            level = logging.INFO if ref.temporary else logging.WARNING
            logger.log(
                level,
                "Script exited %d for %s, falling back to native handler",
                outcome.code,
                section.value,
            )
            return False
        finally:
            ref.discard()

    # ── Native tier ─────────────────────────────────────────────

    def _run_native_tier(self, section: Section) -> SectionResult:
        handler = self.registry.get(section)
        if handler is None:
            raise UnknownSectionError(section.value)

        logger.info("[%s] running native handler %r", section.value, handler)
        self.host.drain_messages()
        try:
            ok = handler.run(self.host)
        except HandlerActionFailure as e:
            logger.error("[%s] %s", section.value, e)
            return SectionResult.failure(
                section,
                tier="native",
                error=str(e),
                error_kind="handler_action_failure",
                messages=self.host.drain_messages(),
            )

        if not ok:
            return SectionResult.failure(
                section,
                tier="native",
                error=f"{section.label} did not complete",
                messages=self.host.drain_messages(),
            )

        return SectionResult.success(
            section,
            tier="native",
            messages=self.host.drain_messages(),
        )


def _elapsed_ms(start: float) -> int:
    return int((time.monotonic() - start) * 1000)


def create_dispatcher(
    settings: Settings,
    runner: CommandRunner | None = None,
    registry: HandlerRegistry | None = None,
    host: HostContext | None = None,
) -> SectionDispatcher:
    """Wire a dispatcher with the default runner, resolver and handlers."""
    if runner is None:
        from macdevkit.adapters.shell.command import SubprocessRunner

        runner = SubprocessRunner()

    return SectionDispatcher(
        host=host if host is not None else detect_host(runner, settings),
        resolver=ScriptResolver(settings.script_path),
        registry=registry if registry is not None else default_registry(),
    )
