"""Pytest configuration and shared fixtures."""

import logging

import pytest

from scopedstate.factory import create
from scopedstate.utils.config import ScopedStateConfig


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo logger levels set by configure_logging()."""
    root = logging.getLogger()
    package_logger = logging.getLogger("scopedstate")
    root_level, package_level = root.level, package_logger.level
    yield
    root.setLevel(root_level)
    package_logger.setLevel(package_level)


@pytest.fixture
def handle():
    """Fresh handle starting at zero."""
    return create()


@pytest.fixture
def sample_config() -> ScopedStateConfig:
    """Non-default configuration."""
    return ScopedStateConfig(
        initial_value=41,
        thread_safe=True,
        id_start=100,
        capture_count=5,
        log_level="DEBUG",
    )
