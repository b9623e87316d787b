"""
Domain models — Pydantic types for section dispatch.

All models are re-exported here for convenient access:

    from macdevkit.core.models import Section, SectionResult, ExitOutcome
"""

from macdevkit.core.models.command import ExitOutcome
from macdevkit.core.models.section import Section, SectionResult

__all__ = [
    # command.py
    "ExitOutcome",
    # section.py
    "Section",
    "SectionResult",
]
