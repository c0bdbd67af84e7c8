"""Generic Cloudflare zone setting reader and writer.

Uses the official Cloudflare Python SDK for API operations.
"""

import asyncio
import logging
from typing import Any

from cloudflare._exceptions import (
    APIConnectionError,
    APIStatusError,
    AuthenticationError,
    BadRequestError,
    NotFoundError,
    PermissionDeniedError,
    RateLimitError,
    UnprocessableEntityError,
)

from cloudflare_security.exceptions import (
    CloudflareAPIError,
    CloudflareAuthError,
    CloudflareNotFoundError,
    CloudflareRateLimitError,
    CloudflareTransportError,
    CloudflareValidationError,
)
from cloudflare_security.models import ZoneSetting
from cloudflare_security.provider import ClientProvider

logger = logging.getLogger(__name__)


class ZoneSettingsClient:
    """Reads and edits individual zone settings by key.

    Neither operation retries; every failure is logged with its zone, key
    and operation and raised as a ``CloudflareAPIError`` subclass.

    Example:
        ```python
        client = ZoneSettingsClient(CloudflareClientProvider())

        setting = await client.get_setting("zone-id", "waf")
        await client.edit_setting("zone-id", "waf", "off")
        ```
    """

    def __init__(self, provider: ClientProvider) -> None:
        """Initialize the settings client.

        Args:
            provider: Source of the authenticated SDK client.
        """
        self._provider = provider

    def _handle_api_error(
        self,
        error: Exception,
        zone_id: str,
        setting_key: str,
    ) -> None:
        """Convert SDK exceptions to our custom exceptions.

        Args:
            error: Exception from the Cloudflare SDK.
            zone_id: Zone the call targeted.
            setting_key: Setting the call targeted.

        Raises:
            CloudflareTransportError: For connection failures and timeouts.
            CloudflareAuthError: For authentication/permission failures.
            CloudflareRateLimitError: For rate limit errors.
            CloudflareNotFoundError: For an unknown zone or setting key.
            CloudflareValidationError: For rejected values.
            CloudflareAPIError: For other API errors.
        """
        context: dict[str, Any] = {"zone_id": zone_id, "setting_key": setting_key}

        if isinstance(error, APIConnectionError):
            msg = f"Connection error: {error}"
            raise CloudflareTransportError(msg, **context) from error

        if not isinstance(error, APIStatusError):
            raise CloudflareAPIError(str(error), **context) from error

        context["code"] = error.status_code
        context["errors"] = _error_details(error)

        if isinstance(error, AuthenticationError | PermissionDeniedError):
            msg = "Authentication failed. Check your API token."
            raise CloudflareAuthError(msg, **context) from error

        if isinstance(error, RateLimitError):
            raise CloudflareRateLimitError(
                retry_after=_retry_after(error),
                **context,
            ) from error

        if isinstance(error, NotFoundError):
            msg = f"Setting '{setting_key}' not found for zone {zone_id}"
            raise CloudflareNotFoundError(msg, **context) from error

        if isinstance(error, BadRequestError | UnprocessableEntityError):
            raise CloudflareValidationError(
                str(error), field="value", **context
            ) from error

        raise CloudflareAPIError(str(error), **context) from error

    async def get_setting(self, zone_id: str, setting_key: str) -> ZoneSetting:
        """Get the current value of a zone setting.

        Args:
            zone_id: The zone identifier.
            setting_key: Remote setting key, e.g. ``waf``.

        Returns:
            ZoneSetting as reported by Cloudflare.

        Raises:
            CloudflareValidationError: If ``zone_id`` is empty.
            CloudflareNotFoundError: If the zone or key doesn't exist.
            CloudflareAPIError: If the API request fails.
            asyncio.CancelledError: If the calling task is cancelled.
        """
        _require_zone_id(zone_id, setting_key)
        logger.info("Getting setting '%s' for zone %s", setting_key, zone_id)
        try:
            client = await self._provider.get_client()
            response = await client.zones.settings.get(setting_key, zone_id=zone_id)
        except asyncio.CancelledError:
            logger.warning(
                "Cancelled getting setting '%s' for zone %s", setting_key, zone_id
            )
            raise
        except Exception as e:
            logger.error(
                "Error getting setting '%s' for zone %s: %s", setting_key, zone_id, e
            )
            self._handle_api_error(e, zone_id, setting_key)
            raise

        setting = _to_zone_setting(response, zone_id, setting_key)
        logger.debug(
            "Setting '%s' for zone %s is %r", setting_key, zone_id, setting.value
        )
        return setting

    async def edit_setting(
        self,
        zone_id: str,
        setting_key: str,
        value: str,
    ) -> ZoneSetting:
        """Change the value of a zone setting.

        Sends ``PATCH /zones/{zone_id}/settings/{setting_key}`` with body
        ``{"value": value}``. The value must already be the wire token the
        setting expects.

        Args:
            zone_id: The zone identifier.
            setting_key: Remote setting key.
            value: Encoded setting value.

        Returns:
            ZoneSetting as confirmed by Cloudflare after the change.

        Raises:
            CloudflareValidationError: If ``zone_id`` is empty or Cloudflare
                rejects the value.
            CloudflareNotFoundError: If the zone or key doesn't exist.
            CloudflareAPIError: If the API request fails.
            asyncio.CancelledError: If the calling task is cancelled.
        """
        _require_zone_id(zone_id, setting_key)
        logger.info(
            "Updating setting '%s' for zone %s to %s", setting_key, zone_id, value
        )
        try:
            client = await self._provider.get_client()
            response = await client.zones.settings.edit(
                setting_key,
                zone_id=zone_id,
                value=value,
            )
        except asyncio.CancelledError:
            logger.warning(
                "Cancelled updating setting '%s' for zone %s", setting_key, zone_id
            )
            raise
        except Exception as e:
            logger.error(
                "Error updating setting '%s' for zone %s: %s", setting_key, zone_id, e
            )
            self._handle_api_error(e, zone_id, setting_key)
            raise

        setting = _to_zone_setting(response, zone_id, setting_key)
        logger.info(
            "Updated setting '%s' for zone %s, now %r",
            setting_key,
            zone_id,
            setting.value,
        )
        return setting


def _require_zone_id(zone_id: str, setting_key: str) -> None:
    if not zone_id or not zone_id.strip():
        msg = "Zone ID must not be empty"
        raise CloudflareValidationError(
            msg, field="zone_id", zone_id=zone_id, setting_key=setting_key
        )


def _to_zone_setting(response: Any, zone_id: str, setting_key: str) -> ZoneSetting:
    """Build a ZoneSetting from an SDK response object."""
    if response is None:
        msg = f"Empty result for setting '{setting_key}' on zone {zone_id}"
        raise CloudflareAPIError(msg, zone_id=zone_id, setting_key=setting_key)

    return ZoneSetting(
        id=getattr(response, "id", None) or setting_key,
        value=getattr(response, "value", None),
        editable=getattr(response, "editable", None),
        modified_on=getattr(response, "modified_on", None),
    )


def _error_details(error: APIStatusError) -> list[dict[str, Any]]:
    body = error.body
    if isinstance(body, dict):
        errors = body.get("errors")
        if isinstance(errors, list):
            return [e for e in errors if isinstance(e, dict)]
    return []


def _retry_after(error: APIStatusError) -> int | None:
    value = error.response.headers.get("retry-after")
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None
