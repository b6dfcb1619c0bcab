"""Hex color parsing, the default palette and label contrast."""

from __future__ import annotations

import logging
import re

from spin_wheel.types import InvalidColorError

logger = logging.getLogger(__name__)

DEFAULT_PALETTE: tuple[str, ...] = (
    "#FF6B6B", "#4ECDC4", "#45B7D1", "#96CEB4",
    "#FFEAA7", "#DDA0DD", "#98D8C8", "#F7DC6F",
    "#BB8FCE", "#85C1E9", "#F8B500", "#FF6F61",
)

DARK_TEXT = "#000000"
LIGHT_TEXT = "#FFFFFF"

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


def parse_hex(value: object) -> tuple[int, int, int]:
    """Parse ``#RRGGBB`` (or the ``#RGB`` shorthand) into an RGB triple.

    The leading ``#`` is optional. Raises ``InvalidColorError`` for
    anything else.
    """
    if not isinstance(value, str):
        raise InvalidColorError(value, f"Color must be a string, got {type(value).__name__}")
    match = _HEX_RE.match(value.strip())
    if match is None:
        raise InvalidColorError(value, f"Invalid hex color {value!r}")
    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


def to_hex(rgb: tuple[int, int, int]) -> str:
    r, g, b = rgb
    return f"#{r:02X}{g:02X}{b:02X}"


def palette_color(index: int) -> str:
    return DEFAULT_PALETTE[index % len(DEFAULT_PALETTE)]


def resolve_color(value: str | None, index: int) -> str:
    """Normalize ``value`` or fall back to the palette entry for ``index``.

    A malformed color does not fail the load; it is logged and replaced.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return palette_color(index)

    try:
        return to_hex(parse_hex(value))
    except InvalidColorError as exc:
        fallback = palette_color(index)
        logger.warning("%s for option %d, using %s", exc, index + 1, fallback)
        return fallback


def luminance(color: str) -> float:
    """Relative luminance in [0, 1] using the 0.299/0.587/0.114 weighting."""
    r, g, b = parse_hex(color)
    return (0.299 * r + 0.587 * g + 0.114 * b) / 255


def text_color(background: str) -> str:
    """Black text on light sectors, white text on dark ones."""
    return DARK_TEXT if luminance(background) > 0.5 else LIGHT_TEXT
