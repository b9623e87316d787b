"""
Handler registry — one native handler per section.

The dispatcher never instantiates handlers itself; it looks them up
here by Section.
"""

from __future__ import annotations

import logging

from macdevkit.core.models.section import Section
from macdevkit.handlers.base import SectionHandler

logger = logging.getLogger(__name__)


class HandlerRegistry:
    """Section → native handler lookup."""

    def __init__(self) -> None:
        self._handlers: dict[Section, SectionHandler] = {}

    def register(self, handler: SectionHandler) -> None:
        """Register a handler under its own section."""
        section = handler.section
        if section in self._handlers:
            logger.warning("Overwriting existing handler: %s", section.value)
        self._handlers[section] = handler
        logger.debug("Registered handler: %s", section.value)

    def unregister(self, section: Section) -> None:
        self._handlers.pop(section, None)

    def get(self, section: Section) -> SectionHandler | None:
        """Look up the handler for a section."""
        return self._handlers.get(section)

    def list_sections(self) -> list[Section]:
        """Registered sections, in full-setup order."""
        return [s for s in Section if s in self._handlers]

    def __contains__(self, section: object) -> bool:
        return section in self._handlers

    def __len__(self) -> int:
        return len(self._handlers)


def default_registry() -> HandlerRegistry:
    """A registry with the built-in handler for every section."""
    from macdevkit.handlers.casks import AppsHandler, docker_handler, iterm_handler, vscode_handler
    from macdevkit.handlers.shell_env import NodeHandler, OhMyZshHandler, SshHandler
    from macdevkit.handlers.system import MacOSHandler, WorkspaceHandler
    from macdevkit.handlers.toolchain import (
        DevToolsHandler,
        GitHandler,
        HomebrewHandler,
        XcodeHandler,
    )

    registry = HandlerRegistry()
    for handler in (
        XcodeHandler(),
        HomebrewHandler(),
        GitHandler(),
        SshHandler(),
        vscode_handler(),
        NodeHandler(),
        iterm_handler(),
        OhMyZshHandler(),
        docker_handler(),
        DevToolsHandler(),
        AppsHandler(),
        MacOSHandler(),
        WorkspaceHandler(),
    ):
        registry.register(handler)
    return registry
