"""Shared test fixtures."""
import pytest
from unittest.mock import MagicMock


@pytest.fixture(autouse=True)
def env_vars(monkeypatch):
    """Set required environment variables for all tests."""
    monkeypatch.setenv("PALOMA_BASE_URL", "https://shop.example.com/api")
    monkeypatch.setenv("PALOMA_API_KEY", "test-key")
    monkeypatch.setenv("PALOMA_LOG_FORMAT_SUCCESS", "{method} {uri} {code}")
    monkeypatch.setenv("PALOMA_LOG_FORMAT_FAILURE", "{method} {uri} {code} {error}")
    monkeypatch.delenv("PALOMA_DEFAULT_CHANNEL", raising=False)
    monkeypatch.delenv("PALOMA_DEFAULT_LOCALE", raising=False)


@pytest.fixture
def config():
    """Create a FactoryConfig from the test env vars."""
    from paloma_client.config import load_config
    return load_config()


@pytest.fixture
def mock_create():
    """Client constructor returning a new mock per call."""
    return MagicMock(side_effect=lambda options: MagicMock(options=options))


@pytest.fixture
def factory(mock_create):
    """Create a ClientFactory backed by the mock constructor."""
    from paloma_client.clients import ClientFactory
    return ClientFactory("https://shop.example.com/api", "test-key", create_client=mock_create)
