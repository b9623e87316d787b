"""
Application handlers — GUI apps installed as Homebrew casks.
"""

from __future__ import annotations

from macdevkit.core.context import HostContext
from macdevkit.core.models.section import Section
from macdevkit.handlers.base import SectionHandler, act, probe


class CaskHandler(SectionHandler):
    """Install one Homebrew cask if ``brew list --cask`` does not know it.

    Args:
        section: Section this handler serves.
        cask: Cask token, e.g. ``visual-studio-code``.
        display_name: Name shown to the user.
    """

    def __init__(self, section: Section, cask: str, display_name: str):
        self._section = section
        self.cask = cask
        self.display_name = display_name

    @property
    def section(self) -> Section:
        return self._section

    def run(self, ctx: HostContext) -> bool:
        outcome = probe(ctx.runner, ["brew", "list", "--cask", self.cask])
        if outcome is not None and outcome.ok:
            ctx.note(f"✓ {self.display_name} already installed")
            return True

        act(self.section, ctx.runner, ["brew", "install", "--cask", self.cask])
        ctx.note(f"{self.display_name} installed")
        return True


def vscode_handler() -> CaskHandler:
    return CaskHandler(Section.VSCODE, "visual-studio-code", "Visual Studio Code")


def iterm_handler() -> CaskHandler:
    return CaskHandler(Section.ITERM, "iterm2", "iTerm2")


def docker_handler() -> CaskHandler:
    return CaskHandler(Section.DOCKER, "docker", "Docker Desktop")


class AppsHandler(SectionHandler):
    """Choosing apps is interactive, so only the script tier does it."""

    @property
    def section(self) -> Section:
        return Section.APPS

    def run(self, ctx: HostContext) -> bool:
        ctx.note("Application selection is interactive and is handled by the setup script.")
        ctx.note("Install apps individually with: brew install --cask <app>")
        return True
