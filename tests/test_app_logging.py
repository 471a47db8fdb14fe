"""Tests for logging configuration."""

import logging

from fluorescence_scan.app_logging import configure_logging


def test_configure_logging_idempotent() -> None:
    logger = logging.getLogger("fluorescence_scan")
    logger.handlers.clear()

    configure_logging()
    first_count = len(logger.handlers)

    configure_logging()
    second_count = len(logger.handlers)

    assert first_count == 1
    assert second_count == 1


def test_configure_logging_applies_level() -> None:
    logger = logging.getLogger("fluorescence_scan")

    configure_logging("debug")

    assert logger.level == logging.DEBUG
    configure_logging()
