from __future__ import annotations

import logging

import pytest


@pytest.fixture(autouse=True)
def _restore_gitgrade_logger():
    """configure_logging() mutates the package logger; undo it between tests."""
    logger = logging.getLogger("gitgrade")
    handlers = list(logger.handlers)
    propagate = logger.propagate
    level = logger.level
    yield
    logger.handlers[:] = handlers
    logger.propagate = propagate
    logger.setLevel(level)
