"""Cloudflare security client exceptions.

Every failure carries the zone and setting it was raised for, so callers can
log or report it without threading that context through themselves.
"""

from typing import Any


class CloudflareAPIError(Exception):
    """Base exception for Cloudflare zone setting errors.

    Attributes:
        message: Error message
        code: HTTP status or Cloudflare error code (if available)
        errors: List of error details from Cloudflare response
        response: Raw response data (if available)
        zone_id: Zone the failing call targeted
        setting_key: Remote setting key the failing call targeted
    """

    def __init__(
        self,
        message: str,
        code: int | None = None,
        errors: list[dict[str, Any]] | None = None,
        response: dict[str, Any] | None = None,
        zone_id: str | None = None,
        setting_key: str | None = None,
    ) -> None:
        """Initialize CloudflareAPIError.

        Args:
            message: Error message
            code: HTTP status or Cloudflare error code
            errors: List of error details
            response: Raw response data
            zone_id: Zone identifier
            setting_key: Remote setting key
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.errors = errors or []
        self.response = response
        self.zone_id = zone_id
        self.setting_key = setting_key

    def __str__(self) -> str:
        """Return string representation."""
        parts = [self.message]
        if self.code:
            parts.append(f"(code: {self.code})")
        if self.errors:
            error_msgs = [e.get("message", str(e)) for e in self.errors]
            parts.append(f"Details: {'; '.join(error_msgs)}")
        return " ".join(parts)


class CloudflareTransportError(CloudflareAPIError):
    """Network-level failure.

    Raised when the request never produced an HTTP response, e.g. a
    connection reset or a timeout.
    """


class CloudflareAuthError(CloudflareAPIError):
    """Authentication or authorization error.

    Raised when the API token is invalid, expired, or lacks the zone
    settings permission.
    """


class CloudflareRateLimitError(CloudflareAPIError):
    """Rate limit exceeded error.

    Attributes:
        retry_after: Seconds to wait before retrying (if provided)
    """

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        retry_after: int | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.retry_after = retry_after


class CloudflareNotFoundError(CloudflareAPIError):
    """Unknown zone or setting key."""


class CloudflareValidationError(CloudflareAPIError):
    """The submitted value or identifier was rejected.

    Raised both for values refused by Cloudflare and for values that can be
    rejected locally before any request is made.

    Attributes:
        field: Field that failed validation (if known)
    """

    def __init__(
        self,
        message: str,
        field: str | None = None,
        **kwargs: Any,
    ) -> None:
        """Initialize validation error.

        Args:
            message: Error message
            field: Field that failed validation
            **kwargs: Additional arguments for base class
        """
        super().__init__(message, **kwargs)
        self.field = field
