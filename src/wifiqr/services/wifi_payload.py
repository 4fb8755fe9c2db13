"""Wi-Fi payload helpers and configuration model."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from wifiqr.constants import SECURITY_ALIASES, SECURITY_DEFAULT
from wifiqr.errors import ValidationError
from wifiqr.services.styling import DEFAULT_COLOR_SPEC, ColorSpec, StyleKind

# Backslash must stay first so later escapes are not doubled.
_ESCAPED_CHARACTERS = ("\\", ";", ",", '"', "'", "<", ">")


class SecurityKind(Enum):
    WPA = "WPA"
    WEP = "WEP"
    OPEN = "OPEN"

    @property
    def token(self) -> str:
        """Return the value written into the T: field."""
        return "nopass" if self is SecurityKind.OPEN else self.value


@dataclass(frozen=True)
class NetworkConfig:
    ssid: str
    password: str = ""
    security: SecurityKind = SecurityKind.WPA
    hidden: bool = False
    style: StyleKind = StyleKind.SQUARE
    color: ColorSpec = DEFAULT_COLOR_SPEC

    @property
    def is_open(self) -> bool:
        return self.security is SecurityKind.OPEN

    def validate(self) -> None:
        """Raise ValidationError when required fields are missing."""
        if not self.ssid.strip():
            raise ValidationError("SSID cannot be empty")
        if not self.is_open and not self.password:
            raise ValidationError("Password cannot be empty for secured networks")

    @classmethod
    def create(cls, ssid: str, password: str = "", **kwargs: object) -> NetworkConfig:
        """Build a config and validate it."""
        config = cls(ssid=ssid, password=password, **kwargs)  # type: ignore[arg-type]
        config.validate()
        return config


def escape(value: str | None) -> str:
    """Escape payload delimiters for QR-encoded Wi-Fi strings."""
    if not value:
        return ""
    for char in _ESCAPED_CHARACTERS:
        value = value.replace(char, f"\\{char}")
    return value


def resolve_security(value: str | None) -> SecurityKind:
    """Map free-form security input to a security kind; unknown input means WPA."""
    key = (value or "").strip().upper()
    return SecurityKind(SECURITY_ALIASES.get(key, SECURITY_DEFAULT))


def build_wifi_payload(config: NetworkConfig) -> str:
    """Build a Wi-Fi QR payload string from a configuration."""
    # S, T, P order is required by positional scanners; H: is never written.
    ssid = escape(config.ssid)
    token = config.security.token

    if token == "nopass":
        return f"WIFI:S:{ssid};T:nopass;;"

    password = escape(config.password)
    return f"WIFI:S:{ssid};T:{token};P:{password};;"
