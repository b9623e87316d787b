"""
Shell environment handlers — SSH keys, Node via nvm, Oh My Zsh.

None of these act in native code: SSH and nvm need interactive input,
and Oh My Zsh is only distributed as a remote install script. Each one
checks what it can and tells the user how to finish.
"""

from __future__ import annotations

from macdevkit.core.context import HostContext
from macdevkit.core.models.section import Section
from macdevkit.handlers.base import SectionHandler

OH_MY_ZSH_INSTALL = (
    'sh -c "$(curl -fsSL https://raw.githubusercontent.com/ohmyzsh/ohmyzsh/master/tools/install.sh)"'
)


class SshHandler(SectionHandler):
    @property
    def section(self) -> Section:
        return Section.SSH

    def run(self, ctx: HostContext) -> bool:
        key = ctx.ssh_dir / "id_ed25519"
        if key.exists():
            ctx.note(f"✓ SSH key already exists at {key}")
            return True

        ctx.note("SSH key generation needs your email and passphrase; use the setup script:")
        ctx.note("  macdevkit ssh   (with the full setup script installed)")
        ctx.note('or run: ssh-keygen -t ed25519 -C "you@example.com"')
        return True


class NodeHandler(SectionHandler):
    @property
    def section(self) -> Section:
        return Section.NODE

    def run(self, ctx: HostContext) -> bool:
        ctx.note("Node.js is installed through nvm by the setup script.")
        ctx.note("To install manually: brew install nvm && nvm install --lts")
        return True


class OhMyZshHandler(SectionHandler):
    @property
    def section(self) -> Section:
        return Section.ZSH

    def run(self, ctx: HostContext) -> bool:
        if ctx.oh_my_zsh_dir.is_dir():
            ctx.note("✓ Oh My Zsh already installed")
            return True

        ctx.note("Oh My Zsh is not installed. Install it with:")
        ctx.note(f"  {OH_MY_ZSH_INSTALL}")
        return True
