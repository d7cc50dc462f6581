"""
Tests for logging setup.
"""

import logging
from pathlib import Path

import pytest

from electron_fix.core.observability.logging_config import _parse_level, setup_logging


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for h in root.handlers:
        if h not in handlers:
            h.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestParseLevel:
    def test_names(self):
        assert _parse_level("debug") == logging.DEBUG
        assert _parse_level("ERROR") == logging.ERROR

    def test_unknown_is_warning(self):
        assert _parse_level("chatty") == logging.WARNING
        assert _parse_level(None) == logging.WARNING


class TestSetupLogging:
    def test_console_only(self):
        setup_logging("INFO")
        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert root.level == logging.INFO

    def test_file_handler_lowers_root(self, tmp_path: Path):
        log_file = tmp_path / "efix.log"
        setup_logging("WARNING", log_file=str(log_file), log_file_level="DEBUG")
        root = logging.getLogger()
        assert len(root.handlers) == 2
        assert root.level == logging.DEBUG

        logging.getLogger("electron_fix.test").debug("into the file")
        for h in root.handlers:
            h.flush()
        assert "into the file" in log_file.read_text()

    @pytest.mark.parametrize("level, expected", [
        ("WARNING", "%(levelname)s: %(message)s"),
        ("INFO", "[%(name)s]"),
        ("DEBUG", "%(lineno)d"),
    ])
    def test_console_format_follows_level(self, level, expected):
        setup_logging(level)
        console = logging.getLogger().handlers[0]
        assert expected in console.formatter._fmt

    def test_leaves_other_loggers_alone(self):
        other = logging.getLogger("concurrent.futures")
        before = other.level
        setup_logging("INFO")
        assert other.level == before
