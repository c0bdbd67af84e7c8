"""Tests for cloudflare_security exceptions."""

import pytest
from cloudflare_security.exceptions import (
    CloudflareAPIError,
    CloudflareAuthError,
    CloudflareNotFoundError,
    CloudflareRateLimitError,
    CloudflareTransportError,
    CloudflareValidationError,
)


class TestCloudflareAPIError:
    """Tests for the base exception."""

    @pytest.mark.unit
    def test_basic_initialization(self) -> None:
        """Verify initialization with message only."""
        error = CloudflareAPIError("Request failed")

        assert str(error) == "Request failed"
        assert error.code is None
        assert error.errors == []
        assert error.zone_id is None
        assert error.setting_key is None

    @pytest.mark.unit
    def test_str_includes_code_and_details(self) -> None:
        """Verify code and error details are rendered."""
        error = CloudflareAPIError(
            "Bad request",
            code=400,
            errors=[{"code": 1007, "message": "Invalid value for zone setting"}],
        )

        assert str(error) == (
            "Bad request (code: 400) Details: Invalid value for zone setting"
        )

    @pytest.mark.unit
    def test_context(self) -> None:
        """Verify zone and setting context is kept."""
        error = CloudflareNotFoundError("Missing", zone_id="z1", setting_key="waf")

        assert error.zone_id == "z1"
        assert error.setting_key == "waf"


class TestSubclasses:
    """Tests for the error taxonomy."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "error_class",
        [
            CloudflareAuthError,
            CloudflareNotFoundError,
            CloudflareRateLimitError,
            CloudflareTransportError,
            CloudflareValidationError,
        ],
    )
    def test_inherits_from_base(self, error_class) -> None:
        """Verify every error kind can be caught as CloudflareAPIError."""
        assert issubclass(error_class, CloudflareAPIError)

    @pytest.mark.unit
    def test_rate_limit_defaults(self) -> None:
        """Verify rate limit error defaults."""
        error = CloudflareRateLimitError(retry_after=30)

        assert error.message == "Rate limit exceeded"
        assert error.retry_after == 30

    @pytest.mark.unit
    def test_validation_field(self) -> None:
        """Verify validation error keeps the failing field."""
        error = CloudflareValidationError("Bad level", field="value", code=400)

        assert error.field == "value"
        assert error.code == 400
