"""Shared pytest fixtures for rolegraph tests."""

import pytest

from rolegraph.logging import get_logger, set_logger


@pytest.fixture(autouse=True)
def restore_process_logger():
    """Restore the process-wide logger after each test."""
    previous = get_logger()
    yield
    set_logger(previous)
