"""Shared pytest fixtures."""

import sys

from loguru import logger
import pytest


@pytest.fixture(autouse=True)
def reset_logger():
    """Restore loguru's default handler after tests that reconfigure it."""
    yield
    logger.remove()
    logger.add(sys.stderr)
