"""Cloudflare security client configuration settings.

Environment-based configuration for Cloudflare API authentication and
transport defaults.
"""


from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class CloudflareSecuritySettings(BaseSettings):
    """Configuration for the Cloudflare security client.

    All settings can be configured via environment variables or .env file.

    Attributes:
        cloudflare_api_token: API token with Zone Settings read/edit permission
        cloudflare_base_url: Optional API base URL override
        request_timeout: HTTP request timeout in seconds
        max_retries: Retries performed by the SDK transport (0 disables them)
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
    )

    # Required authentication
    cloudflare_api_token: SecretStr = Field(
        ...,
        alias="CLOUDFLARE_API_TOKEN",
        description="Cloudflare API token with zone settings permissions",
    )

    cloudflare_base_url: str | None = Field(
        default=None,
        alias="CLOUDFLARE_BASE_URL",
        description="Override for the Cloudflare API base URL",
    )

    # Transport configuration
    request_timeout: float = Field(
        default=30,
        alias="CF_REQUEST_TIMEOUT",
        description="HTTP request timeout in seconds",
    )
    max_retries: int = Field(
        default=0,
        alias="CF_MAX_RETRIES",
        description="Retries performed by the SDK transport layer",
    )

    @field_validator("request_timeout")
    @classmethod
    def validate_request_timeout(cls, v: float) -> float:
        """Validate the timeout is positive."""
        if v <= 0:
            msg = f"Invalid request timeout: {v}. Must be greater than 0"
            raise ValueError(msg)
        return v

    @field_validator("max_retries")
    @classmethod
    def validate_max_retries(cls, v: int) -> int:
        """Validate the retry count is not negative."""
        if v < 0:
            msg = f"Invalid max retries: {v}. Must be 0 or greater"
            raise ValueError(msg)
        return v

    def get_token_value(self) -> str:
        """Get the API token as a plain string.

        Returns:
            The API token value.
        """
        return self.cloudflare_api_token.get_secret_value()


_settings_instance: CloudflareSecuritySettings | None = None


def get_cloudflare_security_settings() -> CloudflareSecuritySettings:
    """Get default settings (singleton, reads from environment).

    Returns:
        CloudflareSecuritySettings instance.

    Raises:
        ValidationError: If required environment variables are missing.
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = CloudflareSecuritySettings()
    return _settings_instance


def reset_settings() -> None:
    """Reset singleton (for testing)."""
    global _settings_instance
    _settings_instance = None
