"""Flag and prompt merging tests."""

import logging
from collections.abc import Callable

import pytest

from wifiqr.errors import ValidationError
from wifiqr.services.config_builder import CliOptions, collect_config, mask
from wifiqr.services.prompts import Prompter
from wifiqr.services.styling import StyleKind
from wifiqr.services.wifi_payload import SecurityKind, build_wifi_payload


def scripted(*answers: str) -> Callable[[str], str]:
    """Return a reader that replays the given answers in order."""
    pending = list(answers)

    def _read(_message: str) -> str:
        return pending.pop(0)

    return _read


def unused(_message: str) -> str:
    raise AssertionError("Prompted in non-interactive mode")


def test_has_any_flags() -> None:
    """Ensure any single flag switches off interactive mode."""
    assert CliOptions().has_any_flags is False
    assert CliOptions(hidden=True).has_any_flags is True
    assert CliOptions(color="blue").has_any_flags is True
    assert CliOptions(output="out").has_any_flags is True


def test_flags_minimal_defaults(caplog: pytest.LogCaptureFixture) -> None:
    """Ensure SSID and password flags fill in the documented defaults."""
    prompter = Prompter(reader=unused, secret_reader=unused)
    with caplog.at_level(logging.INFO):
        config = collect_config(CliOptions(ssid="Home", password="pass123"), prompter)

    assert config.security is SecurityKind.WPA
    assert config.hidden is False
    assert config.style is StyleKind.SQUARE
    assert config.color.hex == "#000000"
    assert build_wifi_payload(config) == "WIFI:S:Home;T:WPA;P:pass123;;"
    assert "*******" in caplog.text
    assert "pass123" not in caplog.text


def test_flags_full() -> None:
    """Ensure every flag is honored."""
    options = CliOptions(
        ssid="Lab",
        password="abc",
        security="wep",
        hidden=True,
        style="circle",
        color="#f57",
    )
    config = collect_config(options, Prompter(reader=unused, secret_reader=unused))
    assert config.security is SecurityKind.WEP
    assert config.hidden is True
    assert config.style is StyleKind.CIRCLE
    assert config.color.hex == "#f57"


def test_flags_open_skips_password() -> None:
    """Ensure open networks do not need a password flag."""
    config = collect_config(CliOptions(ssid="Guest", security="open"))
    assert config.security is SecurityKind.OPEN
    assert config.password == ""


def test_flags_invalid_style_and_color_fall_back(caplog: pytest.LogCaptureFixture) -> None:
    """Ensure bad style and color flags warn and use defaults."""
    options = CliOptions(ssid="Home", password="pw", style="hexagon", color="notacolor")
    with caplog.at_level(logging.WARNING):
        config = collect_config(options)
    assert config.style is StyleKind.SQUARE
    assert config.color.hex == "#000000"
    assert "Invalid style" in caplog.text
    assert "Invalid color" in caplog.text


def test_flags_missing_ssid() -> None:
    """Ensure flags without an SSID are rejected."""
    with pytest.raises(ValidationError, match="SSID is required"):
        collect_config(CliOptions(password="pw"))


def test_flags_missing_password() -> None:
    """Ensure secured networks require a password flag."""
    with pytest.raises(ValidationError, match="Password is required"):
        collect_config(CliOptions(ssid="Home", security="wpa2"))


def test_flags_blank_ssid() -> None:
    """Ensure whitespace-only SSIDs are rejected."""
    with pytest.raises(ValidationError, match="SSID cannot be empty"):
        collect_config(CliOptions(ssid="   ", password="pw"))


def test_interactive_secured_network() -> None:
    """Ensure prompts are asked in order for a secured network."""
    prompter = Prompter(
        # ssid, security (auto), hidden, style, color
        reader=scripted("Home", "1", "n", "2", "blue"),
        secret_reader=scripted("pass123"),
        writer=lambda _line: None,
    )
    config = collect_config(CliOptions(), prompter)

    assert config.ssid == "Home"
    assert config.security is SecurityKind.WPA
    assert config.password == "pass123"
    assert config.hidden is False
    assert config.style is StyleKind.CIRCLE
    assert config.color.hex == "#0066CC"


def test_interactive_open_network_skips_password() -> None:
    """Ensure the password prompt is skipped for open networks."""
    prompter = Prompter(
        reader=scripted("Guest", "4", "y", "", ""),
        secret_reader=unused,
        writer=lambda _line: None,
    )
    config = collect_config(CliOptions(), prompter)

    assert config.security is SecurityKind.OPEN
    assert config.hidden is True
    assert config.style is StyleKind.SQUARE
    assert config.color.hex == "#000000"
    assert build_wifi_payload(config) == "WIFI:S:Guest;T:nopass;;"


def test_interactive_invalid_color_falls_back() -> None:
    """Ensure an unknown interactive color uses black."""
    prompter = Prompter(
        reader=scripted("Home", "3", "", "", "sparkly"),
        secret_reader=scripted("abc123"),
        writer=lambda _line: None,
    )
    config = collect_config(CliOptions(), prompter)
    assert config.security is SecurityKind.WEP
    assert config.color.hex == "#000000"


def test_mask() -> None:
    """Ensure passwords are masked one star per character."""
    assert mask("abc") == "***"
    assert mask("") == ""
