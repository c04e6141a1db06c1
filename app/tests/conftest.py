"""Shared fixtures for the test suite."""

import pytest

from core.config import get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Drop the cached process-wide settings between tests."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
