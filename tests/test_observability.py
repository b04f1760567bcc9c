"""
Tests for logging configuration.
"""

import io
import logging

import pytest

from archmodel.core.models import Location, Model
from archmodel.core.observability.logging_config import (
    PACKAGE_LOGGER,
    parse_level,
    setup_logging,
)


@pytest.fixture(autouse=True)
def restore_package_logger():
    """Put the package logger back the way it was after each test."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    handlers = list(logger.handlers)
    level = logger.level
    yield
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(level)


def _build_model() -> None:
    model = Model()
    system = model.add_software_system(Location.INTERNAL, "System")
    container = system.add_container("Database")
    model.add_deployment_node("Node").add(container)


class TestParseLevel:
    """Level name parsing."""

    def test_known_levels(self):
        """Level names are case-insensitive."""
        assert parse_level("debug") == logging.DEBUG
        assert parse_level("INFO") == logging.INFO

    def test_unknown_falls_back_to_warning(self):
        """Unknown, empty or missing names mean WARNING."""
        assert parse_level("chatty") == logging.WARNING
        assert parse_level(None) == logging.WARNING
        assert parse_level("") == logging.WARNING


class TestSetupLogging:
    """setup_logging() on the package logger."""

    def test_debug_output_includes_placements(self):
        """DEBUG shows each instance placement."""
        stream = io.StringIO()
        setup_logging("DEBUG", stream=stream)

        _build_model()

        output = stream.getvalue()
        assert "Deployed /System/Database[1]" in output
        assert "DEBUG" in output

    def test_warning_level_is_quiet(self):
        """Building a model logs nothing at WARNING."""
        stream = io.StringIO()
        setup_logging("WARNING", stream=stream)

        _build_model()

        assert stream.getvalue() == ""

    def test_warnings_use_minimal_format(self):
        """At WARNING, records are printed as bare messages."""
        stream = io.StringIO()
        setup_logging("WARNING", stream=stream)

        model = Model()
        system = model.add_software_system(Location.INTERNAL, "System")
        a = system.add_container("A")
        b = system.add_container("B")
        a.uses(b, "Calls")
        a.uses(b, "Calls")

        assert stream.getvalue().startswith("Relationship /System/A -> /System/B")

    def test_does_not_touch_root_logger(self):
        """Only the package logger is configured."""
        root_handlers = list(logging.getLogger().handlers)
        setup_logging("INFO", stream=io.StringIO())
        assert logging.getLogger().handlers == root_handlers

    def test_repeated_setup_replaces_handlers(self):
        """Calling setup twice does not double the output."""
        setup_logging("INFO", stream=io.StringIO())
        setup_logging("INFO", stream=io.StringIO())
        stream_handlers = [
            h for h in logging.getLogger(PACKAGE_LOGGER).handlers
            if isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
        ]
        assert len(stream_handlers) == 1

    def test_file_handler(self, tmp_path):
        """The log file can be more verbose than the console."""
        log_file = tmp_path / "archmodel.log"
        setup_logging("WARNING", log_file=str(log_file), log_file_level="DEBUG", stream=io.StringIO())

        _build_model()

        for handler in logging.getLogger(PACKAGE_LOGGER).handlers:
            handler.flush()
        assert "Added container /System/Database" in log_file.read_text(encoding="utf-8")
