"""Native handlers — in-process implementations of every section.

Public re-exports for convenient access.
"""

from macdevkit.handlers.base import SectionHandler
from macdevkit.handlers.registry import HandlerRegistry, default_registry

__all__ = [
    "HandlerRegistry",
    "SectionHandler",
    "default_registry",
]
