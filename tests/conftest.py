import pytest

from dictexpect.config import reset_display_settings


@pytest.fixture(autouse=True)
def fresh_display_settings():
    """Avoid cross-test leakage of cached display settings."""
    reset_display_settings()
    yield
    reset_display_settings()
