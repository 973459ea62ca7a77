from __future__ import annotations

import logging

import pytest

from thermocalc.constants import LOGGER_NAME


@pytest.fixture(autouse=True)
def _restore_package_logger():
    """setup_logger() replaces handlers; put the library defaults back after each test."""
    logger = logging.getLogger(LOGGER_NAME)
    handlers, level = list(logger.handlers), logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
