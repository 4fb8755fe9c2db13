"""Style and color lookups for rendered QR codes."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum

from PIL import ImageColor

from wifiqr.constants import (
    COLOR_PALETTE,
    DEFAULT_COLOR,
    DEFAULT_STYLE,
    HEX_COLOR_PATTERN,
    QR_STYLES,
)
from wifiqr.errors import RecoverableInputError

logger = logging.getLogger(__name__)

_HEX_RE = re.compile(HEX_COLOR_PATTERN)


class StyleKind(Enum):
    SQUARE = "square"
    CIRCLE = "circle"

    @property
    def description(self) -> str:
        return QR_STYLES[self.value]


@dataclass(frozen=True)
class ColorSpec:
    name: str | None
    hex: str

    def __post_init__(self) -> None:
        if not isinstance(self.hex, str) or not _HEX_RE.match(self.hex):
            raise ValueError(f"Invalid hex color: {self.hex!r}")

    @property
    def rgb(self) -> tuple[int, int, int]:
        """Return the color as an RGB tuple for the rasterizer."""
        red, green, blue = ImageColor.getrgb(self.hex)[:3]
        return red, green, blue

    @property
    def label(self) -> str:
        return f"{self.name} ({self.hex})" if self.name else self.hex


DEFAULT_COLOR_SPEC = ColorSpec(name=DEFAULT_COLOR, hex=COLOR_PALETTE[DEFAULT_COLOR])


def is_hex_color(value: str) -> bool:
    """Return True when the value is a #rgb or #rrggbb hex color."""
    return bool(_HEX_RE.match(value))


def resolve_color(value: str | None) -> ColorSpec:
    """Resolve a hex triplet/sextet or palette name into a color spec."""
    if value is None:
        raise RecoverableInputError("No color given")
    candidate = value.strip()
    if is_hex_color(candidate):
        return ColorSpec(name=None, hex=candidate)

    name = candidate.lower()
    if name in COLOR_PALETTE:
        return ColorSpec(name=name, hex=COLOR_PALETTE[name])

    raise RecoverableInputError(f"Unknown color: {value!r}")


def resolve_style(value: str | None) -> StyleKind:
    """Validate a style name; empty input selects the default style."""
    name = (value or "").strip().lower()
    if not name:
        return StyleKind(DEFAULT_STYLE)
    try:
        return StyleKind(name)
    except ValueError as exc:
        raise RecoverableInputError(f"Unknown style: {value!r}") from exc


def style_or_default(value: str | None) -> StyleKind:
    """Resolve a style, falling back to the default with a warning."""
    try:
        return resolve_style(value)
    except RecoverableInputError:
        logger.warning("🎨 Invalid style %r, using default: %s", value, DEFAULT_STYLE)
        return StyleKind(DEFAULT_STYLE)


def color_or_default(value: str | None) -> ColorSpec:
    """Resolve a color, falling back to black with a warning."""
    try:
        return resolve_color(value)
    except RecoverableInputError:
        logger.warning(
            "🖍️ Invalid color %r, using default: %s", value, DEFAULT_COLOR_SPEC.label
        )
        return DEFAULT_COLOR_SPEC


def style_choices() -> list[str]:
    """Return menu labels for every available style."""
    return [f"{style.value} - {style.description}" for style in StyleKind]


def palette_listing() -> list[str]:
    """Return help lines for every named color."""
    width = max(len(name) for name in COLOR_PALETTE)
    return [f"{name.ljust(width)}  {hex_value}" for name, hex_value in COLOR_PALETTE.items()]
