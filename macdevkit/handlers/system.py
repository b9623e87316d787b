"""
System handlers — macOS preferences and the workspace directory.
"""

from __future__ import annotations

import logging

from macdevkit.core.context import HostContext
from macdevkit.core.errors import HandlerActionFailure
from macdevkit.core.models.section import Section
from macdevkit.handlers.base import SectionHandler, fire_and_forget

logger = logging.getLogger(__name__)

# (domain, key, type flag, value) for ``defaults write``
MACOS_DEFAULTS: list[tuple[str, str, str, str]] = [
    ("com.apple.finder", "AppleShowAllFiles", "-bool", "true"),
    ("com.apple.finder", "ShowPathbar", "-bool", "true"),
    ("com.apple.finder", "ShowStatusBar", "-bool", "true"),
    ("NSGlobalDomain", "KeyRepeat", "-int", "2"),
    ("NSGlobalDomain", "InitialKeyRepeat", "-int", "15"),
    ("NSGlobalDomain", "NSAutomaticSpellingCorrectionEnabled", "-bool", "false"),
]

# Services restarted so the new defaults take effect
RESTART_SERVICES = ["Finder", "SystemUIServer"]


class MacOSHandler(SectionHandler):
    """Apply preference writes, each best-effort, then restart UI services."""

    @property
    def section(self) -> Section:
        return Section.MACOS

    def run(self, ctx: HostContext) -> bool:
        applied = 0
        for domain, key, kind, value in MACOS_DEFAULTS:
            if fire_and_forget(ctx.runner, ["defaults", "write", domain, key, kind, value]):
                applied += 1
            else:
                logger.warning("Could not set %s %s", domain, key)

        for service in RESTART_SERVICES:
            fire_and_forget(ctx.runner, ["killall", service])

        ctx.note(f"macOS settings applied: {applied}/{len(MACOS_DEFAULTS)}")
        return True


class WorkspaceHandler(SectionHandler):
    @property
    def section(self) -> Section:
        return Section.WORKSPACE

    def run(self, ctx: HostContext) -> bool:
        target = ctx.workspace_dir
        if target.is_dir():
            ctx.note(f"✓ {target} already exists")
            return True
        try:
            target.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise HandlerActionFailure(self.section.value, f"Cannot create {target}: {e}") from e
        ctx.note(f"Created {target} directory")
        return True
