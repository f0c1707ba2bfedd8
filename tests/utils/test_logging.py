"""Tests for configure_logging and get_logger."""

from __future__ import annotations

import logging
import sys

import pytest

from confidencebands.utils.logging import LOG_LEVEL_ENV_VAR, LOGGER_NAME, configure_logging, get_logger


@pytest.fixture
def package_logger():
    """Package logger with its handlers and level restored after the test."""
    logger = logging.getLogger(LOGGER_NAME)
    handlers = logger.handlers[:]
    level = logger.level
    yield logger
    for h in logger.handlers[:]:
        logger.removeHandler(h)
    for h in handlers:
        logger.addHandler(h)
    logger.setLevel(level)


def _stderr_handlers(logger: logging.Logger) -> list[logging.Handler]:
    return [h for h in logger.handlers if isinstance(h, logging.StreamHandler) and h.stream is sys.stderr]


def test_get_logger_names():
    assert get_logger().name == LOGGER_NAME
    assert get_logger("confidencebands.chart").name == "confidencebands.chart"


def test_configure_logging_explicit_level(package_logger):
    configure_logging("DEBUG", force=True)
    assert package_logger.level == logging.DEBUG
    assert len(_stderr_handlers(package_logger)) == 1


def test_configure_logging_reads_env(package_logger, monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "warning")
    configure_logging(force=True)
    assert package_logger.level == logging.WARNING


def test_configure_logging_twice_keeps_one_handler(package_logger):
    """A second call without force only updates the level."""
    configure_logging("INFO", force=True)
    configure_logging("ERROR")
    handlers = _stderr_handlers(package_logger)
    assert len(handlers) == 1
    assert handlers[0].level == logging.ERROR
    assert package_logger.level == logging.ERROR


def test_unknown_level_name_defaults_to_info(package_logger):
    configure_logging("CHATTY", force=True)
    assert package_logger.level == logging.INFO
