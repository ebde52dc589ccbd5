"""Color conversion for CSS variable emission."""

from __future__ import annotations

import re

HEX_COLOR_PATTERN = re.compile(r"^#?([0-9A-Fa-f]{3}|[0-9A-Fa-f]{6}|[0-9A-Fa-f]{8})$")


def is_hex_color(value: object) -> bool:
    """Return True for #RGB, #RRGGBB or #RRGGBBAA strings."""
    return isinstance(value, str) and HEX_COLOR_PATTERN.match(value) is not None


def _hex_to_rgb(hex_color: str) -> tuple[float, float, float]:
    """Convert hex color to normalized (0-1) RGB channels. Alpha is ignored."""
    match = HEX_COLOR_PATTERN.match(hex_color)
    if not match:
        raise ValueError(f"Invalid hex color: {hex_color}")

    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)

    return (
        int(digits[0:2], 16) / 255,
        int(digits[2:4], 16) / 255,
        int(digits[4:6], 16) / 255,
    )


def hex_to_hsl(hex_color: str) -> str:
    """
    Convert a hex color to the bare HSL triple used by shadcn-style variables.

    Args:
        hex_color: Color such as "#ff0000"

    Returns:
        HSL string without the hsl() wrapper, e.g. "0 100% 50%"

    Raises:
        ValueError: If the value is not a hex color
    """
    r, g, b = _hex_to_rgb(hex_color)

    high = max(r, g, b)
    low = min(r, g, b)
    h = 0.0
    s = 0.0
    lightness = (high + low) / 2

    if high != low:
        d = high - low
        s = d / (2 - high - low) if lightness > 0.5 else d / (high + low)

        if high == r:
            h = (g - b) / d + (6 if g < b else 0)
        elif high == g:
            h = (b - r) / d + 2
        else:
            h = (r - g) / d + 4
        h /= 6

    return f"{_round(h * 360)} {_round(s * 100)}% {_round(lightness * 100)}%"


def _round(value: float) -> int:
    # Math.round semantics: halves go up
    return int(value + 0.5)
