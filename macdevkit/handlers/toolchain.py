"""
Toolchain handlers — Xcode CLT, Homebrew, Git, command-line dev tools.
"""

from __future__ import annotations

import logging

from macdevkit.core.config.loader import BREW_SHELLENV_LINE
from macdevkit.core.context import HostContext
from macdevkit.core.errors import HandlerActionFailure
from macdevkit.core.models.section import Section
from macdevkit.handlers.base import SectionHandler, act, command_exists, probe

logger = logging.getLogger(__name__)

GIT_RECOMMENDED_DEFAULTS = [
    ("init.defaultBranch", "main"),
    ("core.editor", "code --wait"),
    ("pull.rebase", "false"),
]


class XcodeHandler(SectionHandler):
    """Xcode Command Line Tools.

    ``xcode-select --install`` only opens the system installer dialog;
    the handler does not wait for it, triggering counts as success.
    """

    @property
    def section(self) -> Section:
        return Section.XCODE

    def run(self, ctx: HostContext) -> bool:
        outcome = probe(ctx.runner, ["xcode-select", "-p"])
        if outcome is not None and outcome.ok:
            ctx.note("✓ Xcode Command Line Tools already installed")
            return True

        act(self.section, ctx.runner, ["xcode-select", "--install"])
        ctx.note("Xcode Command Line Tools installation triggered")
        ctx.note("Please wait for the installation to complete.")
        return True


class HomebrewHandler(SectionHandler):
    """Homebrew, plus PATH activation on Apple Silicon."""

    @property
    def section(self) -> Section:
        return Section.BREW

    def run(self, ctx: HostContext) -> bool:
        if command_exists(ctx.runner, "brew"):
            ctx.note("✓ Homebrew already installed")
            # brew stays present even if update fails
            try:
                act(self.section, ctx.runner, ["brew", "update"])
                ctx.note("Homebrew updated")
            except HandlerActionFailure as e:
                logger.warning("brew update failed: %s", e)
            return True

        url = ctx.settings.brew_install_url
        act(self.section, ctx.runner, ["/bin/bash", "-c", f'/bin/bash -c "$(curl -fsSL {url})"'])

        if ctx.is_apple_silicon:
            append_to_profile(ctx, BREW_SHELLENV_LINE)
            ctx.note(f"Added Homebrew to PATH in {ctx.profile_path}")

        ctx.note("Homebrew installed")
        return True


def append_to_profile(ctx: HostContext, line: str) -> None:
    """Append ``line`` to the shell profile, creating it if needed.

    Append-only: running twice writes the line twice.
    """
    path = ctx.profile_path
    try:
        with path.open("a", encoding="utf-8") as fh:
            fh.write(f"\n{line}\n")
    except OSError as e:
        raise HandlerActionFailure(Section.BREW.value, f"Cannot update {path}: {e}") from e


class GitHandler(SectionHandler):
    """Git via Homebrew. Identity is left to the user."""

    @property
    def section(self) -> Section:
        return Section.GIT

    def run(self, ctx: HostContext) -> bool:
        if command_exists(ctx.runner, "git"):
            ctx.note("✓ Git already installed")
        else:
            act(self.section, ctx.runner, ["brew", "install", "git"])
            ctx.note("Git installed")

        name = probe(ctx.runner, ["git", "config", "--global", "user.name"])
        if name is not None and name.ok and name.stdout:
            ctx.note(f"✓ Git already configured for {name.stdout}")
            return True

        ctx.note("Git identity is not configured. Run:")
        ctx.note('  git config --global user.name "Your Name"')
        ctx.note('  git config --global user.email "you@example.com"')
        ctx.note("Recommended defaults:")
        for key, value in GIT_RECOMMENDED_DEFAULTS:
            ctx.note(f'  git config --global {key} "{value}"')
        return True


class DevToolsHandler(SectionHandler):
    """Command-line utilities, one ``brew install`` each.

    A tool that fails to install is reported and skipped; the section
    still succeeds once every tool has been attempted.
    """

    @property
    def section(self) -> Section:
        return Section.DEVTOOLS

    def run(self, ctx: HostContext) -> bool:
        failed: list[str] = []
        for tool in ctx.settings.devtools:
            try:
                act(self.section, ctx.runner, ["brew", "install", tool])
            except HandlerActionFailure as e:
                logger.warning("Skipping %s: %s", tool, e)
                failed.append(tool)

        installed = len(ctx.settings.devtools) - len(failed)
        ctx.note(f"Developer tools installed: {installed}/{len(ctx.settings.devtools)}")
        if failed:
            ctx.note(f"Failed: {', '.join(failed)}")
        return True
