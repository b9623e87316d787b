"""
Configuration loader — reads ~/.macdevkit.yml into a Settings model.

Every setting has a default, so the file is optional. Values are
resolved in precedence order:

    environment variable  >  YAML file  >  built-in default
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)

# Default config filename, looked up in the home directory
CONFIG_FILE = ".macdevkit.yml"

# Where a packaging step drops the full automation script
PACKAGED_SCRIPT = Path(__file__).resolve().parents[2] / "data" / "init.sh"

HOMEBREW_INSTALL_URL = "https://raw.githubusercontent.com/Homebrew/install/HEAD/install.sh"

# Puts an Apple Silicon Homebrew on PATH for login shells
BREW_SHELLENV_LINE = 'eval "$(/opt/homebrew/bin/brew shellenv)"'

DEFAULT_DEVTOOLS = ["wget", "jq", "tree", "htop", "tmux", "ripgrep", "fzf", "gh"]

# env var → settings field
_ENV_OVERRIDES = {
    "MACDEVKIT_SCRIPT": "script_path",
    "MACDEVKIT_WORKSPACE": "workspace_dir",
}


class ConfigError(Exception):
    """Raised when the settings file is unreadable or invalid."""


class Settings(BaseModel):
    """User-tunable knobs for the installer."""

    script_path: Path = PACKAGED_SCRIPT
    workspace_dir: Path = Path("~/Workspace")
    profile_file: Path = Path("~/.zprofile")
    devtools: list[str] = Field(default_factory=lambda: list(DEFAULT_DEVTOOLS))
    brew_install_url: str = HOMEBREW_INSTALL_URL

    @field_validator("script_path", mode="after")
    @classmethod
    def _expand_user(cls, value: Path) -> Path:
        return value.expanduser()


def default_config_path() -> Path:
    """Path of the per-user settings file."""
    return Path.home() / CONFIG_FILE


def load_settings(path: Path | None = None, environ: dict[str, str] | None = None) -> Settings:
    """Load settings from YAML and the environment.

    Args:
        path: Explicit settings file. If None, ``~/.macdevkit.yml`` is
            used when it exists.
        environ: Environment mapping (default: ``os.environ``).

    Returns:
        Validated Settings.

    Raises:
        ConfigError: If an explicit file is missing, or any file is invalid.
    """
    environ = os.environ if environ is None else environ
    data: dict = {}

    if path is not None and not path.is_file():
        raise ConfigError(f"Config file not found: {path}")
    if path is None:
        candidate = default_config_path()
        path = candidate if candidate.is_file() else None

    if path is not None:
        logger.debug("Loading settings from %s", path)
        try:
            raw = path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigError(f"Cannot read {path}: {e}") from e

        try:
            loaded = yaml.safe_load(raw)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e

        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            raise ConfigError(f"Expected a YAML mapping in {path}, got {type(loaded).__name__}")
        data.update(loaded)

    for var, field in _ENV_OVERRIDES.items():
        if environ.get(var):
            data[field] = environ[var]

    try:
        settings = Settings.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid settings: {e}") from e

    logger.debug("Script path: %s", settings.script_path)
    return settings
