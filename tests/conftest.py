"""Pytest configuration for cloudflare-security tests."""

import os
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from cloudflare_security.settings import reset_settings

# Test constants
TEST_API_TOKEN = "test-api-token-secret"


@pytest.fixture(autouse=True)
def reset_settings_after_test():
    """Reset settings singleton after each test."""
    yield
    reset_settings()


@pytest.fixture
def mock_env_vars():
    """Set required environment variables for testing."""
    with patch.dict(
        os.environ,
        {
            "CLOUDFLARE_API_TOKEN": TEST_API_TOKEN,
        },
    ):
        yield


@pytest.fixture
def setting_response():
    """Factory for SDK-shaped zone setting responses."""

    def make(setting_id, value, editable=True):
        mock_setting = MagicMock()
        mock_setting.id = setting_id
        mock_setting.value = value
        mock_setting.editable = editable
        mock_setting.modified_on = None
        return mock_setting

    return make


@pytest.fixture
def mock_cloudflare_client():
    """Create a mock AsyncCloudflare client."""
    mock_instance = MagicMock()
    mock_instance.zones.settings.get = AsyncMock()
    mock_instance.zones.settings.edit = AsyncMock()
    return mock_instance


@pytest.fixture
def mock_provider(mock_cloudflare_client):
    """Create a provider that hands out the mock client."""
    provider = MagicMock()
    provider.get_client = AsyncMock(return_value=mock_cloudflare_client)
    return provider
