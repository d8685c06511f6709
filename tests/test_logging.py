"""Tests for logging utilities."""

import logging
from io import StringIO

import pytest

from dsugraph import ForestDisjointSets
from dsugraph.logging import (
    _resolve_level,
    configure_logging,
    get_logger,
    set_log_level,
)


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    configure_logging(level=logging.WARNING)


def test_get_logger_returns_logger():
    """Test that get_logger returns a logger instance."""
    logger = get_logger("test_module")
    assert isinstance(logger, logging.Logger)
    assert logger.name == "dsugraph.test_module"


def test_get_logger_keeps_package_names():
    """Test module names already inside the package are not prefixed twice."""
    assert get_logger("dsugraph.graphs.mst").name == "dsugraph.graphs.mst"
    assert get_logger().name == "dsugraph"


def test_get_logger_caching():
    """Test that get_logger caches loggers."""
    logger1 = get_logger("test_module")
    logger2 = get_logger("test_module")
    assert logger1 is logger2


def test_get_logger_different_modules():
    """Test that different modules get different loggers."""
    logger1 = get_logger("module1")
    logger2 = get_logger("module2")
    assert logger1 is not logger2
    assert logger1.name != logger2.name


def test_set_log_level_string():
    """Test that set_log_level accepts string levels."""
    logger = get_logger("test_module")

    set_log_level("DEBUG")
    assert logger.level == logging.DEBUG

    set_log_level("error")
    assert logger.level == logging.ERROR


def test_set_log_level_applies_to_new_loggers():
    """Test loggers created after set_log_level pick up the level."""
    set_log_level(logging.INFO)
    assert get_logger("created_after_level_change").level == logging.INFO


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, logging.WARNING),
        ("INFO", logging.INFO),
        (" debug ", logging.DEBUG),
        ("not-a-level", logging.WARNING),
        (logging.ERROR, logging.ERROR),
    ],
)
def test_resolve_level(value, expected):
    """Test level names and numbers resolve, junk falls back to WARNING."""
    assert _resolve_level(value) == expected


def test_configure_logging():
    """Test configure_logging function."""
    stream = StringIO()
    logger = get_logger("test_module")
    configure_logging(level=logging.DEBUG, stream=stream)

    logger.debug("Debug message")

    output = stream.getvalue()
    assert "[DEBUG] dsugraph.test_module: Debug message" in output


def test_configure_logging_format():
    """Test a custom format string is used."""
    stream = StringIO()
    logger = get_logger("test_module")
    configure_logging(level=logging.INFO, format_string="%(levelname)s|%(message)s", stream=stream)

    logger.info("hello")
    assert stream.getvalue().strip() == "INFO|hello"


def test_union_logs_at_debug():
    """Test disjoint-set unions report the link they make."""
    stream = StringIO()
    get_logger("dsugraph.disjoint.forest")
    configure_logging(level=logging.DEBUG, stream=stream)

    dsu = ForestDisjointSets()
    dsu.make_set("a")
    dsu.make_set("b")
    dsu.union("a", "b")
    assert "dsugraph.disjoint.forest" in stream.getvalue()


def test_logger_does_not_propagate():
    """Test that loggers don't propagate to root logger."""
    logger = get_logger("test_module")
    assert logger.propagate is False
