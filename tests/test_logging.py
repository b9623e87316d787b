"""
Tests for logging setup — level precedence, console and file handlers.
"""

import logging
from pathlib import Path

import pytest

from macdevkit.core.observability.logging_config import (
    parse_level,
    resolve_level,
    setup_logging,
)


@pytest.fixture
def root_logger():
    """Restore the root logger's handlers and level after each test."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestParseLevel:
    @pytest.mark.parametrize("name", ["debug", "DEBUG", " Debug "])
    def test_any_case(self, name):
        assert parse_level(name) == logging.DEBUG

    @pytest.mark.parametrize("name", [None, "", "chatty"])
    def test_unknown_falls_back_to_warning(self, name):
        assert parse_level(name) == logging.WARNING

    def test_custom_default(self):
        assert parse_level("", default=logging.INFO) == logging.INFO


class TestResolveLevel:
    def test_default_is_warning(self):
        assert resolve_level(environ={}) == logging.WARNING

    def test_env_level(self):
        assert resolve_level(environ={"MACDEVKIT_LOG_LEVEL": "info"}) == logging.INFO

    def test_debug_beats_everything(self):
        env = {"MACDEVKIT_LOG_LEVEL": "error"}
        assert resolve_level(debug=True, verbose=True, quiet=True, environ=env) == logging.DEBUG

    def test_verbose_beats_quiet(self):
        assert resolve_level(verbose=True, quiet=True, environ={}) == logging.INFO

    def test_quiet_beats_env(self):
        env = {"MACDEVKIT_LOG_LEVEL": "debug"}
        assert resolve_level(quiet=True, environ=env) == logging.ERROR


class TestSetupLogging:
    def test_single_console_handler(self, root_logger):
        setup_logging(logging.WARNING, environ={})
        setup_logging(logging.WARNING, environ={})
        [console] = root_logger.handlers
        assert isinstance(console, logging.StreamHandler)
        assert console.level == logging.WARNING
        assert root_logger.level == logging.WARNING

    def test_debug_console_shows_source_line(self, root_logger):
        setup_logging(logging.DEBUG, environ={})
        assert "%(lineno)d" in root_logger.handlers[0].formatter._fmt

    def test_warning_console_is_minimal(self, root_logger):
        setup_logging(logging.WARNING, environ={})
        assert root_logger.handlers[0].formatter._fmt == "%(levelname)s: %(message)s"

    def test_file_handler_gets_its_own_level(self, root_logger, tmp_path: Path):
        log_file = tmp_path / "macdevkit.log"
        setup_logging(
            logging.WARNING,
            environ={"MACDEVKIT_LOG_FILE": str(log_file), "MACDEVKIT_LOG_FILE_LEVEL": "debug"},
        )
        assert root_logger.level == logging.DEBUG

        logging.getLogger("macdevkit.test").debug("written to file only")
        for handler in root_logger.handlers:
            handler.flush()
        assert "written to file only" in log_file.read_text()

    def test_file_level_defaults_to_console_level(self, root_logger, tmp_path: Path):
        log_file = tmp_path / "macdevkit.log"
        setup_logging(logging.INFO, environ={"MACDEVKIT_LOG_FILE": str(log_file)})
        file_handler = next(h for h in root_logger.handlers if isinstance(h, logging.FileHandler))
        assert file_handler.level == logging.INFO
