"""
Tailwind theme extension builder.

Buckets validated tokens by type into the six theme keys Tailwind extends.
Lenient by design: tokens whose value does not fit their type are skipped,
and unresolved references are kept verbatim.
"""

from __future__ import annotations

import re
from typing import Any

from .models import DesignToken, TokenType, TypographyValue
from .references import build_token_map, resolve_reference

THEME_KEYS = ("colors", "spacing", "fontSize", "boxShadow", "borderRadius", "fontFamily")

COLOR_PREFIX = re.compile(r"^colou?r[-_]")
SPACING_PREFIX = re.compile(r"^spacing[-_]")
FONT_PREFIX = re.compile(r"^font[-_]")
SHADOW_PREFIX = re.compile(r"^shadow[-_]")
RADIUS_PREFIX = re.compile(r"^(border-?radius|radii)[-_]")


def _theme_name(name: str, prefix: re.Pattern[str]) -> str:
    """Strip the category prefix and normalize separators to hyphens."""
    return re.sub(r"[-_]", "-", prefix.sub("", name, count=1))


def transform_tokens(tokens: list[DesignToken]) -> dict[str, Any]:
    """
    Compile tokens into a Tailwind theme extension.

    Args:
        tokens: Validated design tokens

    Returns:
        Mapping with any of colors, spacing, fontSize, boxShadow,
        borderRadius and fontFamily. Empty buckets are omitted.
    """
    token_map = build_token_map(tokens)
    theme: dict[str, dict[str, Any]] = {key: {} for key in THEME_KEYS}

    for token in tokens:
        value = token.value

        if token.type == TokenType.COLOR and isinstance(value, str):
            name = _theme_name(token.name, COLOR_PREFIX)
            theme["colors"][name] = resolve_reference(value, token_map)

        elif token.type == TokenType.SPACING and isinstance(value, str):
            name = _theme_name(token.name, SPACING_PREFIX)
            theme["spacing"][name] = resolve_reference(value, token_map)

        elif token.type == TokenType.TYPOGRAPHY and isinstance(value, TypographyValue):
            name = _theme_name(token.name, FONT_PREFIX)
            options: dict[str, Any] = {
                "lineHeight": value.line_height,
                "fontWeight": value.font_weight,
            }
            letter_spacing = resolve_reference(value.letter_spacing, token_map)
            if letter_spacing is not None:
                options["letterSpacing"] = letter_spacing
            theme["fontSize"][name] = [value.font_size, options]

            if value.font_family:
                family_key = name.split("-")[0] or name
                theme["fontFamily"].setdefault(family_key, value.font_family)

        elif token.type == TokenType.SHADOW and isinstance(value, str):
            name = _theme_name(token.name, SHADOW_PREFIX)
            theme["boxShadow"][name] = resolve_reference(value, token_map)

        elif token.type == TokenType.BORDER_RADIUS and isinstance(value, str):
            name = _theme_name(token.name, RADIUS_PREFIX)
            if name == "$default":
                name = "DEFAULT"
            theme["borderRadius"][name] = resolve_reference(value, token_map)

    return {key: bucket for key, bucket in theme.items() if bucket}
