"""
Section and SectionResult models — the dispatch contract.

A Section is one named, independently dispatchable setup step.
A SectionResult is what the dispatcher hands back for it: ok or failed,
which tier produced the outcome, and any notes the handler left for
the user. Like adapter receipts, results are returned, not raised.
"""

from __future__ import annotations

from datetime import UTC, datetime
from enum import StrEnum
from typing import Any, Literal

from pydantic import BaseModel, Field

from macdevkit.core.errors import UnknownSectionError


def _now_iso() -> str:
    """Current UTC time as ISO string."""
    return datetime.now(UTC).isoformat()


class Section(StrEnum):
    """The closed set of setup sections, in full-setup order."""

    XCODE = "xcode"
    BREW = "brew"
    GIT = "git"
    SSH = "ssh"
    VSCODE = "vscode"
    NODE = "node"
    ITERM = "iterm"
    ZSH = "zsh"
    DOCKER = "docker"
    DEVTOOLS = "devtools"
    APPS = "apps"
    MACOS = "macos"
    WORKSPACE = "workspace"

    @classmethod
    def parse(cls, name: str) -> Section:
        """Look up a section by name, ignoring case.

        Raises:
            UnknownSectionError: No section has exactly this name.
        """
        try:
            return cls(name.lower())
        except ValueError:
            raise UnknownSectionError(name) from None

    @property
    def label(self) -> str:
        """Human step label, e.g. 'Install Homebrew'."""
        return _STEP_LABELS[self]


_STEP_LABELS: dict[Section, str] = {
    Section.XCODE: "Install Xcode Command Line Tools",
    Section.BREW: "Install Homebrew",
    Section.GIT: "Install and configure Git",
    Section.SSH: "Generate SSH key",
    Section.VSCODE: "Install Visual Studio Code",
    Section.NODE: "Install Node.js via NVM",
    Section.ITERM: "Install iTerm2",
    Section.ZSH: "Install Oh My Zsh",
    Section.DOCKER: "Install Docker",
    Section.DEVTOOLS: "Install additional developer tools",
    Section.APPS: "Install useful applications",
    Section.MACOS: "Configure macOS settings",
    Section.WORKSPACE: "Create development workspace",
}


Tier = Literal["script", "native"]
# script-tier failures never surface; they fall through to the native handler
ErrorKind = Literal["handler_action_failure"]


class SectionResult(BaseModel):
    """Outcome of running one section.

    Each run is atomic from the caller's point of view: there is no
    partial state, only ok or failed.
    """

    section: Section
    status: Literal["ok", "failed"] = "ok"
    tier: Tier = "native"

    started_at: str = Field(default_factory=_now_iso)
    duration_ms: int = 0

    error: str | None = None
    error_kind: ErrorKind | None = None
    messages: list[str] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        """Whether the section reached its desired end state."""
        return self.status == "ok"

    @property
    def failed(self) -> bool:
        return self.status == "failed"

    @classmethod
    def success(cls, section: Section, tier: Tier, **kwargs: Any) -> SectionResult:
        """Create a success result."""
        return cls(section=section, status="ok", tier=tier, **kwargs)

    @classmethod
    def failure(
        cls,
        section: Section,
        tier: Tier,
        error: str,
        error_kind: ErrorKind = "handler_action_failure",
        **kwargs: Any,
    ) -> SectionResult:
        """Create a failure result."""
        return cls(
            section=section,
            status="failed",
            tier=tier,
            error=error,
            error_kind=error_kind,
            **kwargs,
        )

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json")
