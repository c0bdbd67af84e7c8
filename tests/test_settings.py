"""Tests for cloudflare_security settings module."""

import os
from unittest.mock import patch

import pytest
from cloudflare_security.settings import (
    CloudflareSecuritySettings,
    get_cloudflare_security_settings,
    reset_settings,
)
from pydantic import ValidationError


class TestCloudflareSecuritySettings:
    """Test suite for CloudflareSecuritySettings."""

    @pytest.mark.unit
    def test_required_fields_from_env(self, mock_env_vars):
        """Test that the token is loaded from environment."""
        settings = CloudflareSecuritySettings()

        assert settings.get_token_value() == "test-api-token-secret"

    @pytest.mark.unit
    def test_missing_required_fields_raises_error(self):
        """Test that a missing token raises ValidationError."""
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(ValidationError):
                CloudflareSecuritySettings(_env_file=None)

    @pytest.mark.unit
    def test_default_values(self, mock_env_vars):
        """Test default configuration values."""
        settings = CloudflareSecuritySettings()

        assert settings.request_timeout == 30
        assert settings.max_retries == 0
        assert settings.cloudflare_base_url is None

    @pytest.mark.unit
    def test_token_is_not_exposed_in_repr(self, mock_env_vars):
        """Test the token stays masked."""
        settings = CloudflareSecuritySettings()

        assert "test-api-token-secret" not in repr(settings)

    @pytest.mark.unit
    def test_custom_values(self, mock_env_vars):
        """Test custom transport configuration."""
        with patch.dict(
            os.environ,
            {
                "CF_REQUEST_TIMEOUT": "12.5",
                "CF_MAX_RETRIES": "2",
                "CLOUDFLARE_BASE_URL": "https://example.test/client/v4",
            },
        ):
            settings = CloudflareSecuritySettings()

            assert settings.request_timeout == 12.5
            assert settings.max_retries == 2
            assert settings.cloudflare_base_url == "https://example.test/client/v4"

    @pytest.mark.unit
    def test_zone_is_not_configured(self, mock_env_vars):
        """Test zones are always passed per call, never read from environment."""
        with patch.dict(os.environ, {"CLOUDFLARE_ZONE_ID": "zone-abc"}):
            settings = CloudflareSecuritySettings()

        assert "cloudflare_zone_id" not in CloudflareSecuritySettings.model_fields
        assert not hasattr(settings, "cloudflare_zone_id")

    @pytest.mark.unit
    def test_non_positive_timeout_rejected(self, mock_env_vars):
        """Test that a zero timeout raises error."""
        with patch.dict(os.environ, {"CF_REQUEST_TIMEOUT": "0"}):
            with pytest.raises(ValidationError):
                CloudflareSecuritySettings()

    @pytest.mark.unit
    def test_negative_retries_rejected(self, mock_env_vars):
        """Test that negative retries raise error."""
        with patch.dict(os.environ, {"CF_MAX_RETRIES": "-1"}):
            with pytest.raises(ValidationError):
                CloudflareSecuritySettings()


class TestGetCloudflareSecuritySettings:
    """Test suite for get_cloudflare_security_settings function."""

    @pytest.mark.unit
    def test_returns_singleton(self, mock_env_vars):
        """Test that the same instance is returned."""
        settings1 = get_cloudflare_security_settings()
        settings2 = get_cloudflare_security_settings()

        assert isinstance(settings1, CloudflareSecuritySettings)
        assert settings1 is settings2

    @pytest.mark.unit
    def test_reset_creates_new_instance(self, mock_env_vars):
        """Test that reset_settings allows new instance creation."""
        settings1 = get_cloudflare_security_settings()
        reset_settings()
        settings2 = get_cloudflare_security_settings()

        assert settings1 is not settings2
