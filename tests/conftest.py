"""pytest configuration and fixtures."""

import os

# Set environment defaults for testing before any watchlock imports
os.environ.setdefault("ENVIRONMENT", "development")
os.environ["LOG_LEVEL"] = "DEBUG"

import pytest  # noqa: E402

from watchlock.config import get_settings  # noqa: E402
from watchlock.validate_env import validate_env  # noqa: E402


@pytest.fixture
def fresh_settings():
    """Clear cached settings so a test can change the environment."""
    get_settings.cache_clear()
    validate_env.cache_clear()
    yield get_settings
    get_settings.cache_clear()
    validate_env.cache_clear()
