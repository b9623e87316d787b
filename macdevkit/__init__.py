"""MacDevKit — section-based macOS development environment setup."""

__version__ = "0.1.0"
