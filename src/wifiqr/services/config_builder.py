"""Merge command-line flags and interactive answers into a network config."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from wifiqr.constants import SECURITY_OPTIONS
from wifiqr.errors import ValidationError
from wifiqr.services.prompts import Prompter, not_blank
from wifiqr.services.styling import (
    DEFAULT_COLOR_SPEC,
    StyleKind,
    color_or_default,
    style_choices,
    style_or_default,
)
from wifiqr.services.wifi_payload import NetworkConfig, SecurityKind, resolve_security

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CliOptions:
    ssid: str | None = None
    password: str | None = None
    security: str | None = None
    hidden: bool = False
    style: str | None = None
    color: str | None = None
    output: str | None = None

    @property
    def has_any_flags(self) -> bool:
        """Return True when any flag was given, which disables prompting."""
        return bool(
            self.ssid
            or self.password
            or self.security
            or self.hidden
            or self.style
            or self.color
            or self.output
        )


def mask(secret: str) -> str:
    return "*" * len(secret)


def _config_from_flags(options: CliOptions) -> NetworkConfig:
    if not options.ssid:
        raise ValidationError("SSID is required when using flags. Use -s/--ssid flag")
    logger.info("📡 Using SSID from flag: %s", options.ssid)

    if options.security:
        security = resolve_security(options.security)
        logger.info("🔒 Using security from flag: %s", options.security)
    else:
        security = SecurityKind.WPA
        logger.info("🔒 Using default security: WPA (no -t/--security flag provided)")

    password = ""
    if security is not SecurityKind.OPEN:
        if not options.password:
            raise ValidationError(
                "Password is required for secured networks. "
                "Use -p/--password flag or -t/--security open"
            )
        password = options.password
        logger.info("🔑 Using password from flag: %s", mask(password))

    if options.hidden:
        logger.info("👁️ Using hidden flag: true")
    else:
        logger.info("👁️ Using default hidden: false (no -H/--hidden flag provided)")

    if options.style:
        style = style_or_default(options.style)
        logger.info("🎨 Using style: %s", style.value)
    else:
        style = StyleKind.SQUARE
        logger.info("🎨 Using default style: square (no -S/--style flag provided)")

    if options.color:
        color = color_or_default(options.color)
        logger.info("🖍️ Using color: %s", color.label)
    else:
        color = DEFAULT_COLOR_SPEC
        logger.info("🖍️ Using default color: %s", color.label)

    return NetworkConfig.create(
        ssid=options.ssid,
        password=password,
        security=security,
        hidden=options.hidden,
        style=style,
        color=color,
    )


def _config_from_prompts(prompter: Prompter) -> NetworkConfig:
    ssid = prompter.ask_text(
        "Enter Wi-Fi Network Name (SSID):",
        validate=not_blank("SSID cannot be empty"),
    )
    choice = prompter.ask_choice("Select Wi-Fi Security Type:", SECURITY_OPTIONS)
    security = resolve_security(choice)

    password = ""
    if security is not SecurityKind.OPEN:
        password = prompter.ask_secret(
            "Enter Wi-Fi Password:",
            validate=not_blank("Password cannot be empty for secured networks"),
        )

    hidden = prompter.ask_confirm("Is this a hidden network?", default=False)

    style_label = prompter.ask_choice("Choose QR code style:", style_choices())
    style = style_or_default(style_label.split(" - ")[0])

    color = color_or_default(
        prompter.ask_text(
            "Choose QR color (palette name or #hex):",
            default=DEFAULT_COLOR_SPEC.name,
        )
    )

    return NetworkConfig.create(
        ssid=ssid,
        password=password,
        security=security,
        hidden=hidden,
        style=style,
        color=color,
    )


def collect_config(options: CliOptions, prompter: Prompter | None = None) -> NetworkConfig:
    """Build a validated config from flags, or interactively when none are given."""
    if options.has_any_flags:
        return _config_from_flags(options)
    return _config_from_prompts(prompter or Prompter())
