"""Models for Cloudflare zone security settings.

Value enums, the per-setting encoding rules, and the response model returned
by every read and write.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from cloudflare_security.exceptions import CloudflareValidationError


class OnOff(str, Enum):
    """Binary setting value."""

    ON = "on"
    OFF = "off"

    @classmethod
    def from_bool(cls, enabled: bool) -> "OnOff":
        """Map a boolean to its wire token."""
        return cls.ON if enabled else cls.OFF


class SecurityLevel(str, Enum):
    """Values accepted when writing the security_level setting."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    UNDER_ATTACK = "under_attack"


class SecuritySetting(str, Enum):
    """Supported zone settings, valued by their remote setting key."""

    SECURITY_LEVEL = "security_level"
    WAF = "waf"
    BROWSER_INTEGRITY_CHECK = "browser_check"
    ALWAYS_USE_HTTPS = "always_use_https"
    JAVASCRIPT_DETECTION = "js_challenge"
    AUTOMATIC_HTTPS_REWRITES = "automatic_https_rewrites"
    AI_LABYRINTH = "ai_labyrinth"
    BOT_FIGHT_MODE = "bot_fight_mode"
    SUPER_BOT_FIGHT_MODE = "super_bot_fight_mode"


SettingValue = OnOff | SecurityLevel | str


@dataclass(frozen=True)
class SettingRule:
    """Encoding rule for a single setting.

    Attributes:
        key: Remote setting key
        value_type: Enum whose members are the tokens accepted on write
    """

    key: str
    value_type: type[Enum]

    @property
    def is_binary(self) -> bool:
        """Whether the setting is an on/off toggle."""
        return self.value_type is OnOff

    def encode(self, value: Any) -> str:
        """Convert a caller-supplied value into the wire token.

        Booleans are accepted for binary settings. Strings are matched
        case-insensitively against the enum tokens.

        Args:
            value: Enum member, token string, or bool for binary settings.

        Returns:
            The token to send as the setting value.

        Raises:
            CloudflareValidationError: If the value is not a valid token
                for this setting.
        """
        if isinstance(value, bool):
            if not self.is_binary:
                msg = f"Setting '{self.key}' does not accept a boolean value"
                raise CloudflareValidationError(
                    msg, field="value", setting_key=self.key
                )
            return OnOff.from_bool(value).value

        if isinstance(value, self.value_type):
            return value.value

        if isinstance(value, str):
            try:
                return self.value_type(value.strip().lower()).value
            except ValueError:
                pass

        valid = ", ".join(member.value for member in self.value_type)
        msg = f"Invalid value for '{self.key}': {value!r}. Must be one of: {valid}"
        raise CloudflareValidationError(msg, field="value", setting_key=self.key)

    def decode(self, raw: str) -> SettingValue:
        """Map a wire token back to the enum, keeping unknown tokens as-is."""
        try:
            return self.value_type(raw)
        except ValueError:
            return raw


SETTING_RULES: dict[SecuritySetting, SettingRule] = {
    setting: SettingRule(
        key=setting.value,
        value_type=(
            SecurityLevel if setting is SecuritySetting.SECURITY_LEVEL else OnOff
        ),
    )
    for setting in SecuritySetting
}


class ZoneSetting(BaseModel):
    """A zone setting as reported by Cloudflare.

    Attributes:
        id: Remote setting key
        value: Current value
        editable: Whether the setting can be changed on the zone's plan
        modified_on: When the setting was last changed
    """

    id: str
    value: SettingValue | None = Field(
        default=None, description="Current setting value"
    )
    editable: bool | None = None
    modified_on: datetime | None = None
