"""Named operations for Cloudflare zone security settings.

Every named method resolves to a ``(setting key, encoding rule)`` pair from
``SETTING_RULES`` and delegates to the generic ``ZoneSettingsClient``.
"""

import asyncio
import logging
from typing import Any

from cloudflare_security.client import ZoneSettingsClient
from cloudflare_security.exceptions import CloudflareValidationError
from cloudflare_security.models import (
    SETTING_RULES,
    SecurityLevel,
    SecuritySetting,
    SettingRule,
    ZoneSetting,
)
from cloudflare_security.provider import ClientProvider, CloudflareClientProvider
from cloudflare_security.settings import CloudflareSecuritySettings

logger = logging.getLogger(__name__)


class CloudflareSecurityClient:
    """Client for Cloudflare zone security settings.

    Example:
        ```python
        security = CloudflareSecurityClient.from_settings()

        waf = await security.get_waf("zone-id")
        if waf.value is OnOff.OFF:
            await security.enable_waf("zone-id")

        await security.update_security_level("zone-id", SecurityLevel.HIGH)
        ```
    """

    def __init__(self, provider: ClientProvider) -> None:
        """Initialize the security client.

        Args:
            provider: Source of the authenticated SDK client.
        """
        self._settings_client = ZoneSettingsClient(provider)

    @classmethod
    def from_settings(
        cls,
        settings: CloudflareSecuritySettings | None = None,
    ) -> "CloudflareSecurityClient":
        """Build a client backed by a ``CloudflareClientProvider``.

        Args:
            settings: Optional settings. If not provided, reads from environment.

        Raises:
            ValidationError: If settings are read from an environment missing
                required variables.
        """
        return cls(CloudflareClientProvider(settings))

    # =========================================================================
    # Generic Operations
    # =========================================================================

    async def get(self, zone_id: str, setting: SecuritySetting) -> ZoneSetting:
        """Get a setting with its value decoded.

        Args:
            zone_id: The zone identifier.
            setting: Setting to read.

        Returns:
            ZoneSetting whose value is an ``OnOff``/``SecurityLevel`` member,
            or the raw token if it isn't one the enum knows.
        """
        rule = SETTING_RULES[setting]
        result = await self._settings_client.get_setting(zone_id, rule.key)
        return _decoded(result, rule)

    async def update(
        self,
        zone_id: str,
        setting: SecuritySetting,
        value: Any,
    ) -> ZoneSetting:
        """Encode a value for a setting and write it.

        Args:
            zone_id: The zone identifier.
            setting: Setting to change.
            value: A bool for binary settings, or an enum member/token.

        Returns:
            ZoneSetting as confirmed by Cloudflare.

        Raises:
            CloudflareValidationError: If the value is invalid for the setting;
                no request is made in that case.
        """
        rule = SETTING_RULES[setting]
        token = rule.encode(value)
        result = await self._settings_client.edit_setting(zone_id, rule.key, token)
        return _decoded(result, rule)

    async def enable(self, zone_id: str, setting: SecuritySetting) -> ZoneSetting:
        """Turn a binary setting on."""
        _require_binary(setting)
        return await self.update(zone_id, setting, True)

    async def disable(self, zone_id: str, setting: SecuritySetting) -> ZoneSetting:
        """Turn a binary setting off."""
        _require_binary(setting)
        return await self.update(zone_id, setting, False)

    async def get_all(self, zone_id: str) -> dict[SecuritySetting, ZoneSetting]:
        """Read every supported setting concurrently.

        Args:
            zone_id: The zone identifier.

        Returns:
            Mapping of setting to its current state.

        Raises:
            CloudflareAPIError: If any single read fails.
        """
        settings = list(SecuritySetting)
        results = await asyncio.gather(
            *(self.get(zone_id, setting) for setting in settings)
        )
        logger.debug("Read %d security settings for zone %s", len(results), zone_id)
        return dict(zip(settings, results, strict=True))

    # =========================================================================
    # Security Level
    # =========================================================================

    async def get_security_level(self, zone_id: str) -> ZoneSetting:
        """Get the security level of a zone."""
        return await self.get(zone_id, SecuritySetting.SECURITY_LEVEL)

    async def update_security_level(
        self,
        zone_id: str,
        level: SecurityLevel | str,
    ) -> ZoneSetting:
        """Set the security level of a zone.

        Args:
            zone_id: The zone identifier.
            level: One of ``low``, ``medium``, ``high``, ``under_attack``.

        Raises:
            CloudflareValidationError: If the level is not a known token.
        """
        return await self.update(zone_id, SecuritySetting.SECURITY_LEVEL, level)

    # =========================================================================
    # WAF
    # =========================================================================

    async def get_waf(self, zone_id: str) -> ZoneSetting:
        """Get the WAF setting of a zone."""
        return await self.get(zone_id, SecuritySetting.WAF)

    async def update_waf(self, zone_id: str, enabled: bool) -> ZoneSetting:
        """Turn WAF on or off for a zone."""
        return await self.update(zone_id, SecuritySetting.WAF, enabled)

    async def enable_waf(self, zone_id: str) -> ZoneSetting:
        """Enable WAF for a zone."""
        return await self.enable(zone_id, SecuritySetting.WAF)

    async def disable_waf(self, zone_id: str) -> ZoneSetting:
        """Disable WAF for a zone."""
        return await self.disable(zone_id, SecuritySetting.WAF)

    # =========================================================================
    # Browser Integrity Check
    # =========================================================================

    async def get_browser_integrity_check(self, zone_id: str) -> ZoneSetting:
        """Get the Browser Integrity Check setting of a zone."""
        return await self.get(zone_id, SecuritySetting.BROWSER_INTEGRITY_CHECK)

    async def update_browser_integrity_check(
        self, zone_id: str, enabled: bool
    ) -> ZoneSetting:
        """Turn Browser Integrity Check on or off for a zone."""
        return await self.update(
            zone_id, SecuritySetting.BROWSER_INTEGRITY_CHECK, enabled
        )

    async def enable_browser_integrity_check(self, zone_id: str) -> ZoneSetting:
        """Enable Browser Integrity Check for a zone."""
        return await self.enable(zone_id, SecuritySetting.BROWSER_INTEGRITY_CHECK)

    async def disable_browser_integrity_check(self, zone_id: str) -> ZoneSetting:
        """Disable Browser Integrity Check for a zone."""
        return await self.disable(zone_id, SecuritySetting.BROWSER_INTEGRITY_CHECK)

    # =========================================================================
    # Always Use HTTPS
    # =========================================================================

    async def get_always_use_https(self, zone_id: str) -> ZoneSetting:
        """Get the Always Use HTTPS setting of a zone."""
        return await self.get(zone_id, SecuritySetting.ALWAYS_USE_HTTPS)

    async def update_always_use_https(self, zone_id: str, enabled: bool) -> ZoneSetting:
        """Turn Always Use HTTPS on or off for a zone."""
        return await self.update(zone_id, SecuritySetting.ALWAYS_USE_HTTPS, enabled)

    async def enable_always_use_https(self, zone_id: str) -> ZoneSetting:
        """Enable Always Use HTTPS for a zone."""
        return await self.enable(zone_id, SecuritySetting.ALWAYS_USE_HTTPS)

    async def disable_always_use_https(self, zone_id: str) -> ZoneSetting:
        """Disable Always Use HTTPS for a zone."""
        return await self.disable(zone_id, SecuritySetting.ALWAYS_USE_HTTPS)

    # =========================================================================
    # JavaScript Detection
    # =========================================================================

    async def get_javascript_detection(self, zone_id: str) -> ZoneSetting:
        """Get the JavaScript detection (js_challenge) setting of a zone."""
        return await self.get(zone_id, SecuritySetting.JAVASCRIPT_DETECTION)

    async def update_javascript_detection(
        self, zone_id: str, enabled: bool
    ) -> ZoneSetting:
        """Turn JavaScript detection on or off for a zone."""
        return await self.update(zone_id, SecuritySetting.JAVASCRIPT_DETECTION, enabled)

    async def enable_javascript_detection(self, zone_id: str) -> ZoneSetting:
        """Enable JavaScript detection for a zone."""
        return await self.enable(zone_id, SecuritySetting.JAVASCRIPT_DETECTION)

    async def disable_javascript_detection(self, zone_id: str) -> ZoneSetting:
        """Disable JavaScript detection for a zone."""
        return await self.disable(zone_id, SecuritySetting.JAVASCRIPT_DETECTION)

    # =========================================================================
    # Automatic HTTPS Rewrites
    # =========================================================================

    async def get_automatic_https_rewrites(self, zone_id: str) -> ZoneSetting:
        """Get the Automatic HTTPS Rewrites setting of a zone."""
        return await self.get(zone_id, SecuritySetting.AUTOMATIC_HTTPS_REWRITES)

    async def update_automatic_https_rewrites(
        self, zone_id: str, enabled: bool
    ) -> ZoneSetting:
        """Turn Automatic HTTPS Rewrites on or off for a zone."""
        return await self.update(
            zone_id, SecuritySetting.AUTOMATIC_HTTPS_REWRITES, enabled
        )

    async def enable_automatic_https_rewrites(self, zone_id: str) -> ZoneSetting:
        """Enable Automatic HTTPS Rewrites for a zone."""
        return await self.enable(zone_id, SecuritySetting.AUTOMATIC_HTTPS_REWRITES)

    async def disable_automatic_https_rewrites(self, zone_id: str) -> ZoneSetting:
        """Disable Automatic HTTPS Rewrites for a zone."""
        return await self.disable(zone_id, SecuritySetting.AUTOMATIC_HTTPS_REWRITES)

    # =========================================================================
    # Bot Protection
    # =========================================================================

    async def get_ai_labyrinth(self, zone_id: str) -> ZoneSetting:
        """Get the AI Labyrinth setting of a zone."""
        return await self.get(zone_id, SecuritySetting.AI_LABYRINTH)

    async def update_ai_labyrinth(self, zone_id: str, enabled: bool) -> ZoneSetting:
        """Turn AI Labyrinth on or off for a zone."""
        return await self.update(zone_id, SecuritySetting.AI_LABYRINTH, enabled)

    async def enable_ai_labyrinth(self, zone_id: str) -> ZoneSetting:
        """Enable AI Labyrinth for a zone."""
        return await self.enable(zone_id, SecuritySetting.AI_LABYRINTH)

    async def disable_ai_labyrinth(self, zone_id: str) -> ZoneSetting:
        """Disable AI Labyrinth for a zone."""
        return await self.disable(zone_id, SecuritySetting.AI_LABYRINTH)

    async def get_bot_fight_mode(self, zone_id: str) -> ZoneSetting:
        """Get the Bot Fight Mode setting of a zone."""
        return await self.get(zone_id, SecuritySetting.BOT_FIGHT_MODE)

    async def update_bot_fight_mode(self, zone_id: str, enabled: bool) -> ZoneSetting:
        """Turn Bot Fight Mode on or off for a zone."""
        return await self.update(zone_id, SecuritySetting.BOT_FIGHT_MODE, enabled)

    async def enable_bot_fight_mode(self, zone_id: str) -> ZoneSetting:
        """Enable Bot Fight Mode for a zone."""
        return await self.enable(zone_id, SecuritySetting.BOT_FIGHT_MODE)

    async def disable_bot_fight_mode(self, zone_id: str) -> ZoneSetting:
        """Disable Bot Fight Mode for a zone."""
        return await self.disable(zone_id, SecuritySetting.BOT_FIGHT_MODE)

    async def get_super_bot_fight_mode(self, zone_id: str) -> ZoneSetting:
        """Get the Super Bot Fight Mode setting of a zone."""
        return await self.get(zone_id, SecuritySetting.SUPER_BOT_FIGHT_MODE)

    async def update_super_bot_fight_mode(
        self, zone_id: str, enabled: bool
    ) -> ZoneSetting:
        """Turn Super Bot Fight Mode on or off for a zone."""
        return await self.update(zone_id, SecuritySetting.SUPER_BOT_FIGHT_MODE, enabled)

    async def enable_super_bot_fight_mode(self, zone_id: str) -> ZoneSetting:
        """Enable Super Bot Fight Mode for a zone."""
        return await self.enable(zone_id, SecuritySetting.SUPER_BOT_FIGHT_MODE)

    async def disable_super_bot_fight_mode(self, zone_id: str) -> ZoneSetting:
        """Disable Super Bot Fight Mode for a zone."""
        return await self.disable(zone_id, SecuritySetting.SUPER_BOT_FIGHT_MODE)


def _decoded(result: ZoneSetting, rule: SettingRule) -> ZoneSetting:
    return result.model_copy(update={"value": rule.decode(result.value)})


def _require_binary(setting: SecuritySetting) -> None:
    if not SETTING_RULES[setting].is_binary:
        msg = f"Setting '{setting.value}' is not an on/off setting"
        raise CloudflareValidationError(
            msg, field="setting", setting_key=setting.value
        )
