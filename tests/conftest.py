"""Pytest configuration and shared fixtures."""

import logging
from collections.abc import Generator

import pytest
import structlog

from bitperms import PermissionStore
from bitperms.config import get_settings


@pytest.fixture(autouse=True)
def reset_state() -> Generator[None, None, None]:
    """Drop cached settings and logging config around every test."""
    package_logger = logging.getLogger("bitperms")
    level = package_logger.level
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()
    package_logger.setLevel(level)


@pytest.fixture
def store() -> PermissionStore:
    """Create a store with the default ten flag slots."""
    return PermissionStore(flag_space=10)
