"""Cloudflare zone security settings package.

Provides typed get/update/enable/disable operations for the security-related
zone settings (security level, WAF, bot protection, HTTPS enforcement, ...)
on top of the official Cloudflare SDK.

Example:
    ```python
    import asyncio

    from cloudflare_security import CloudflareSecurityClient, SecurityLevel

    async def harden(zone_id: str) -> None:
        security = CloudflareSecurityClient.from_settings()
        await security.enable_bot_fight_mode(zone_id)
        await security.update_security_level(zone_id, SecurityLevel.HIGH)

    asyncio.run(harden("023e105f4ecef8ad9ca31a8372d0c353"))
    ```
"""

from cloudflare_security.client import ZoneSettingsClient
from cloudflare_security.exceptions import (
    CloudflareAPIError,
    CloudflareAuthError,
    CloudflareNotFoundError,
    CloudflareRateLimitError,
    CloudflareTransportError,
    CloudflareValidationError,
)
from cloudflare_security.models import (
    SETTING_RULES,
    OnOff,
    SecurityLevel,
    SecuritySetting,
    SettingRule,
    SettingValue,
    ZoneSetting,
)
from cloudflare_security.provider import ClientProvider, CloudflareClientProvider
from cloudflare_security.security import CloudflareSecurityClient
from cloudflare_security.settings import (
    CloudflareSecuritySettings,
    get_cloudflare_security_settings,
    reset_settings,
)

__all__ = [
    "SETTING_RULES",
    "ClientProvider",
    "CloudflareAPIError",
    "CloudflareAuthError",
    "CloudflareClientProvider",
    "CloudflareNotFoundError",
    "CloudflareRateLimitError",
    "CloudflareSecurityClient",
    "CloudflareSecuritySettings",
    "CloudflareTransportError",
    "CloudflareValidationError",
    "OnOff",
    "SecurityLevel",
    "SecuritySetting",
    "SettingRule",
    "SettingValue",
    "ZoneSetting",
    "ZoneSettingsClient",
    "get_cloudflare_security_settings",
    "reset_settings",
]

__version__ = "0.1.0"
