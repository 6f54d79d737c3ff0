import pytest
from ..core.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    """Reload settings from the environment for every test"""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def strict_mode(monkeypatch):
    """Enable strict status code checking"""
    monkeypatch.setenv("STATUSKIT_STRICT_STATUS_CODES", "true")
    get_settings.cache_clear()
    yield get_settings()
