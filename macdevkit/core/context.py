"""
Host context — the single source of truth for "which machine are we on."

Handlers never read the home directory, CPU architecture or settings
from globals. The CLI builds one HostContext per operation with
``detect_host()`` and passes it down; tests build their own with a
temporary home and a mock runner.
"""

from __future__ import annotations

import platform
from dataclasses import dataclass, field
from pathlib import Path

from macdevkit.adapters.base import CommandRunner
from macdevkit.core.config.loader import Settings

APPLE_SILICON = "arm64"


@dataclass
class HostContext:
    """Everything a native handler needs to probe and act.

    ``messages`` collects user-facing notes (instructions, redirects)
    that handlers produce; the dispatcher moves them into the result.
    """

    home: Path
    arch: str
    runner: CommandRunner
    settings: Settings = field(default_factory=Settings)
    messages: list[str] = field(default_factory=list)

    @property
    def is_apple_silicon(self) -> bool:
        return self.arch == APPLE_SILICON

    @property
    def profile_path(self) -> Path:
        return self._under_home(self.settings.profile_file)

    @property
    def workspace_dir(self) -> Path:
        return self._under_home(self.settings.workspace_dir)

    @property
    def oh_my_zsh_dir(self) -> Path:
        return self.home / ".oh-my-zsh"

    @property
    def ssh_dir(self) -> Path:
        return self.home / ".ssh"

    def note(self, message: str) -> None:
        """Leave a message for the user."""
        self.messages.append(message)

    def drain_messages(self) -> list[str]:
        """Return and clear the collected messages."""
        drained, self.messages = self.messages, []
        return drained

    def _under_home(self, path: Path) -> Path:
        if path.parts and path.parts[0] == "~":
            return self.home.joinpath(*path.parts[1:])
        if not path.is_absolute():
            return self.home / path
        return path


def detect_host(
    runner: CommandRunner,
    settings: Settings | None = None,
    home: Path | None = None,
    arch: str | None = None,
) -> HostContext:
    """Read the environment once and freeze it into a HostContext."""
    return HostContext(
        home=home if home is not None else Path.home(),
        arch=arch if arch is not None else platform.machine(),
        runner=runner,
        settings=settings if settings is not None else Settings(),
    )
