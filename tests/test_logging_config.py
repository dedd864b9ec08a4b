"""
Tests for logging setup.
"""

from __future__ import annotations

import logging

import pytest
from rich.logging import RichHandler

from term_construct import setup_logging
from term_construct.logging_config import PACKAGE_LOGGER


@pytest.fixture
def package_logger():
    logger = logging.getLogger(PACKAGE_LOGGER)
    handlers, level = list(logger.handlers), logger.level
    yield logger
    logger.handlers = handlers
    logger.setLevel(level)


def _rich_handlers(logger):
    return [h for h in logger.handlers if isinstance(h, RichHandler)]


def test_setup_logging_levels(package_logger) -> None:
    """Verify verbose selects debug and quiet selects warning."""
    setup_logging(verbose=True)
    assert package_logger.level == logging.DEBUG
    setup_logging(verbose=False)
    assert package_logger.level == logging.WARNING


def test_setup_logging_replaces_handler(package_logger) -> None:
    """Verify repeated setup keeps a single Rich handler."""
    first = setup_logging()
    second = setup_logging()
    assert _rich_handlers(package_logger) == [second]
    assert first is not second


def test_library_has_null_handler(package_logger) -> None:
    """Verify the library installs a NullHandler on import."""
    assert any(isinstance(h, logging.NullHandler) for h in package_logger.handlers)
