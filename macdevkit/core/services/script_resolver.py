"""
Script resolver — find (or synthesize) the automation script.

One script serves every section; it branches on its first argument.
Resolution order:

    1. The packaged script at the configured path, made executable.
    2. A minimal degraded script written to the temp directory. It only
       knows ``xcode`` and ``brew`` and exits 1 for anything else, which
       sends the dispatcher on to the native handler. It is single-use:
       the dispatcher discards it after running it.
"""

from __future__ import annotations

import logging
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path

from macdevkit.core.config.loader import BREW_SHELLENV_LINE, HOMEBREW_INSTALL_URL
from macdevkit.core.errors import ScriptResolutionError

logger = logging.getLogger(__name__)

# rwxr-xr-x
SCRIPT_MODE = 0o755

TEMP_PREFIX = "macdevkit-init-"

MINIMAL_SCRIPT = f"""#!/bin/bash
echo "Running with embedded minimal init.sh script"
echo "Warning: This is a minimal version. Full functionality requires the complete init.sh."

case "$1" in
  "xcode")
    if xcode-select -p &> /dev/null; then
      echo "✓ Xcode Command Line Tools already installed"
      exit 0
    else
      echo "Installing Xcode Command Line Tools..."
      xcode-select --install
      echo "Installation triggered. Please follow the prompts."
      exit 0
    fi
    ;;
  "brew")
    if command -v brew &> /dev/null; then
      echo "✓ Homebrew already installed"
      brew update
      exit 0
    else
      echo "Installing Homebrew..."
      /bin/bash -c "$(curl -fsSL {HOMEBREW_INSTALL_URL})" || exit $?
      if [ "$(uname -m)" = "arm64" ]; then
        echo '{BREW_SHELLENV_LINE}' >> "$HOME/.zprofile"
      fi
      exit 0
    fi
    ;;
  *)
    echo "Section $1 not implemented in minimal script."
    exit 1
    ;;
esac
"""


@dataclass(frozen=True)
class ScriptReference:
    """A script on disk. ``temporary`` scripts are deleted after use."""

    path: Path
    temporary: bool = False

    def exists(self) -> bool:
        return self.path.is_file()

    def discard(self) -> None:
        """Delete a temporary script. Failures are ignored."""
        if not self.temporary:
            return
        try:
            self.path.unlink(missing_ok=True)
        except OSError as e:
            logger.debug("Could not remove %s: %s", self.path, e)


class ScriptResolver:
    """Locate the packaged script or fall back to the degraded one.

    Args:
        primary_path: Where the packaged script is expected.
        temp_dir: Directory for degraded scripts (default: system temp).
    """

    def __init__(self, primary_path: Path, temp_dir: Path | None = None):
        self.primary_path = primary_path
        self.temp_dir = temp_dir

    def resolve(self) -> ScriptReference:
        """Return a runnable script reference.

        Raises:
            ScriptResolutionError: The script could not be made executable
                or the degraded script could not be written.
        """
        if self.primary_path.is_file():
            try:
                os.chmod(self.primary_path, SCRIPT_MODE)
            except OSError as e:
                raise ScriptResolutionError(
                    f"Cannot make {self.primary_path} executable: {e}"
                ) from e
            logger.debug("Using packaged script %s", self.primary_path)
            return ScriptReference(self.primary_path)

        logger.info("No script at %s, writing minimal fallback", self.primary_path)
        return self._write_minimal()

    def _write_minimal(self) -> ScriptReference:
        try:
            fd, name = tempfile.mkstemp(
                prefix=TEMP_PREFIX,
                suffix=".sh",
                dir=self.temp_dir,
            )
        except OSError as e:
            raise ScriptResolutionError(f"Cannot write minimal script: {e}") from e

        ref = ScriptReference(Path(name), temporary=True)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(MINIMAL_SCRIPT)
            os.chmod(name, SCRIPT_MODE)
        except OSError as e:
            ref.discard()
            raise ScriptResolutionError(f"Cannot write minimal script: {e}") from e

        logger.debug("Wrote minimal script %s", name)
        return ref

    def is_packaged(self) -> bool:
        """Whether the full packaged script is present."""
        return self.primary_path.is_file()
