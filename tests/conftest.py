"""
Shared test fixtures and configuration.
"""

from pathlib import Path

import pytest

from macdevkit.adapters.mock import MockRunner
from macdevkit.core.config.loader import Settings
from macdevkit.core.context import HostContext
from macdevkit.core.models.section import Section
from macdevkit.handlers.base import SectionHandler
from macdevkit.handlers.registry import HandlerRegistry


class RecordingHandler(SectionHandler):
    """Native handler stub that records every call in a shared log."""

    def __init__(self, section: Section, log: list[Section], result: bool = True):
        self._section = section
        self._log = log
        self._result = result

    @property
    def section(self) -> Section:
        return self._section

    def run(self, ctx: HostContext) -> bool:
        self._log.append(self._section)
        ctx.note(f"recorded {self._section.value}")
        return self._result


@pytest.fixture
def home(tmp_path: Path) -> Path:
    """A throwaway home directory."""
    path = tmp_path / "home"
    path.mkdir()
    return path


@pytest.fixture
def mock_runner() -> MockRunner:
    return MockRunner()


@pytest.fixture
def host(home: Path, mock_runner: MockRunner) -> HostContext:
    """Intel host with default settings and a mock runner."""
    return HostContext(
        home=home,
        arch="x86_64",
        runner=mock_runner,
        settings=Settings(script_path=home / "missing-init.sh"),
    )


@pytest.fixture
def handler_log() -> list[Section]:
    return []


@pytest.fixture
def recording_registry(handler_log: list[Section]) -> HandlerRegistry:
    """A registry whose handlers only record that they ran."""
    registry = HandlerRegistry()
    for section in Section:
        registry.register(RecordingHandler(section, handler_log))
    return registry
