"""
Shared test fixtures.
"""
import pytest

from core.config import reset_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    """Make every test read settings from its own environment."""
    reset_settings()
    yield
    reset_settings()
