"""Application-wide constants."""

from __future__ import annotations

from types import MappingProxyType

APP_NAME = "wifi-qr"
APP_VERSION = "2.0.0"

# QR Code Generation Defaults
DEFAULT_QR_SIZE = 512
DEFAULT_QR_BOX_SIZE = 10
DEFAULT_QR_BORDER = 2
DEFAULT_QR_BACKGROUND_COLOR = (255, 255, 255)
DEFAULT_OUTPUT_NAME = "wifi-qr"
PNG_SUFFIX = ".png"

# Security Label Normalization (upper-cased input -> canonical kind name)
SECURITY_ALIASES = MappingProxyType(
    {
        "": "WPA",
        "WPA": "WPA",
        "WPA2": "WPA",
        "WPA3": "WPA",
        "WEP": "WEP",
        "OPEN": "OPEN",
        "NONE": "OPEN",
        "NOPASS": "OPEN",
        # Interactive menu labels
        "WPA2/WPA3 (MOST COMMON)": "WPA",
        "WPA (LEGACY)": "WPA",
        "WEP (LEGACY)": "WEP",
        "OPEN (NO PASSWORD)": "OPEN",
    }
)
SECURITY_DEFAULT = "WPA"

# Interactive Security Menu
SECURITY_OPTIONS = (
    "WPA2/WPA3 (Most Common)",
    "WPA (Legacy)",
    "WEP (Legacy)",
    "Open (No Password)",
)

# QR Styles (name -> description)
QR_STYLES = MappingProxyType(
    {
        "square": "Classic squares (maximum compatibility)",
        "circle": "Square corners + circular data (aesthetic & reliable)",
    }
)
DEFAULT_STYLE = "square"

# Named Fill Colors
COLOR_PALETTE = MappingProxyType(
    {
        "black": "#000000",
        "blue": "#0066CC",
        "red": "#CC0000",
        "green": "#008000",
        "purple": "#663399",
        "orange": "#FF6600",
        "navy": "#001F3F",
        "teal": "#008080",
        "brown": "#8B4513",
        "gray": "#555555",
    }
)
DEFAULT_COLOR = "black"
HEX_COLOR_PATTERN = r"^#([0-9A-Fa-f]{3}|[0-9A-Fa-f]{6})$"
