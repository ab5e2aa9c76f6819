"""Test configuration and helper fixtures."""

from __future__ import annotations

import logging

import pytest
from click.testing import CliRunner


@pytest.fixture
def runner() -> CliRunner:
    """Provide a click test runner."""

    return CliRunner()


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Drop handlers installed by ``setup_logging`` during a test."""

    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    for handler in root_logger.handlers[:]:
        if handler not in handlers:
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(level)
