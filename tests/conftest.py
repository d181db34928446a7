"""
Pytest fixtures for testing
"""
import pytest

from planner.config import Settings


@pytest.fixture
def settings() -> Settings:
    """Default layout settings, independent of the environment / .env"""
    return Settings(_env_file=None)


@pytest.fixture
def strict_settings() -> Settings:
    """Settings that raise InvariantViolation instead of falling back"""
    return Settings(_env_file=None, LAYOUT_STRICT_INVARIANTS=True)
