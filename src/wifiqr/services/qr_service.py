"""QR image generation helpers."""

from __future__ import annotations

import io
from pathlib import Path

import qrcode
from PIL import Image
from qrcode.constants import ERROR_CORRECT_L, ERROR_CORRECT_Q
from qrcode.image.styledpil import StyledPilImage
from qrcode.image.styles.colormasks import SolidFillColorMask
from qrcode.image.styles.moduledrawers.pil import (
    CircleModuleDrawer,
    SquareModuleDrawer,
)

from wifiqr.constants import (
    DEFAULT_QR_BACKGROUND_COLOR,
    DEFAULT_QR_BORDER,
    DEFAULT_QR_BOX_SIZE,
    DEFAULT_QR_SIZE,
    PNG_SUFFIX,
)
from wifiqr.services.styling import DEFAULT_COLOR_SPEC, ColorSpec, StyleKind


def render_terminal(payload: str) -> str:
    """Render a QR code as text suitable for printing to a terminal."""
    qr = qrcode.QRCode(error_correction=ERROR_CORRECT_L, box_size=1, border=2)
    qr.add_data(payload)
    qr.make(fit=True)
    buffer = io.StringIO()
    qr.print_ascii(out=buffer, invert=True)
    return buffer.getvalue().strip("\n")


def _module_drawer(style: StyleKind) -> SquareModuleDrawer | CircleModuleDrawer:
    if style is StyleKind.CIRCLE:
        return CircleModuleDrawer()
    return SquareModuleDrawer()


def generate_qr_image(
    payload: str,
    style: StyleKind = StyleKind.SQUARE,
    color: ColorSpec = DEFAULT_COLOR_SPEC,
    size: int = DEFAULT_QR_SIZE,
) -> Image.Image:
    """Generate a styled QR image; finder patterns are always square."""
    qr = qrcode.QRCode(
        version=None,
        error_correction=ERROR_CORRECT_Q,
        box_size=DEFAULT_QR_BOX_SIZE,
        border=DEFAULT_QR_BORDER,
    )
    qr.add_data(payload)
    qr.make(fit=True)
    styled = qr.make_image(
        image_factory=StyledPilImage,
        module_drawer=_module_drawer(style),
        eye_drawer=SquareModuleDrawer(),
        color_mask=SolidFillColorMask(
            back_color=DEFAULT_QR_BACKGROUND_COLOR,
            front_color=color.rgb,
        ),
    )
    image: Image.Image = styled.get_image().convert("RGB")

    if size and image.size != (size, size):
        image = image.resize((size, size), Image.Resampling.LANCZOS)

    return image


def png_path(filename: str | Path) -> Path:
    """Return the absolute output path, appending .png when missing."""
    path = Path(filename)
    if not path.name.endswith(PNG_SUFFIX):
        path = path.with_name(path.name + PNG_SUFFIX)
    return path.resolve()


def save_qr_image(image: Image.Image, filename: str | Path) -> Path:
    """Persist a QR image to disk as PNG and return where it was written."""
    path = png_path(filename)
    image.save(path, format="PNG")
    return path
