"""
CSS custom property generation.

Maps semantic shadcn-style roles onto design-system token names and renders
them as a ``@layer base`` stylesheet for the application's global CSS.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType

from .colors import hex_to_hsl, is_hex_color
from .models import DesignToken, TokenType
from .references import build_token_map, resolve_reference

logger = logging.getLogger(__name__)

DEFAULT_RADIUS = "0.5rem"
DEFAULT_FONT_STACK = '"Albert Sans", sans-serif'

RADIUS_TOKEN_NAMES = ("border-radius-DEFAULT", "border-radius-$default")
FONT_FAMILY_TOKEN_NAME = "font-family-heading"

# Semantic role -> token name in the design system's naming convention
SEMANTIC_COLOR_ROLES: Mapping[str, str] = MappingProxyType(
    {
        "primary": "colour-button-primary-default",
        "primary-foreground": "colour-text-inverse",
        "secondary": "colour-button-secondary-default",
        "secondary-foreground": "colour-text-primary",
        "background": "colour-background-default",
        "foreground": "colour-text-primary",
        "card": "colour-layer-default",
        "card-foreground": "colour-text-primary",
        "popover": "colour-layer-default",
        "popover-foreground": "colour-text-primary",
        "muted": "colour-background-subtle",
        "muted-foreground": "colour-text-secondary",
        "accent": "colour-layer-hover",
        "accent-foreground": "colour-text-primary",
        "destructive": "colour-status-error",
        "destructive-foreground": "colour-text-inverse",
        "border": "colour-border-default",
        "input": "colour-border-subtle",
        "ring": "colour-border-active",
    }
)

SEMANTIC_SPACING_ROLES: Mapping[str, str] = MappingProxyType(
    {
        "spacing-xs": "space-01",
        "spacing-sm": "space-02",
        "spacing-md": "space-04",
        "spacing-lg": "space-06",
        "spacing-xl": "space-08",
        "spacing-2xl": "space-09",
    }
)


def _string_value(
    token_map: Mapping[str, DesignToken],
    name: str,
    token_type: TokenType | None = None,
) -> str | None:
    """Value of the named token if it is a string of the expected type."""
    token = token_map.get(name)
    if token is None or not isinstance(token.value, str):
        return None
    if token_type is not None and token.type != token_type:
        return None
    return token.value


def generate_css_variables(
    tokens: list[DesignToken],
    *,
    radius_fallback: str = DEFAULT_RADIUS,
    font_fallback: str = DEFAULT_FONT_STACK,
) -> dict[str, str]:
    """
    Generate CSS custom properties from design tokens.

    Roles whose backing token is missing are omitted. Radius and font
    variables always exist, falling back to the given defaults.

    Args:
        tokens: Validated design tokens
        radius_fallback: Value for --radius when no default radius token exists
        font_fallback: Font stack when no heading family token exists

    Returns:
        Mapping of ``--name`` to CSS value
    """
    token_map = build_token_map(tokens)
    css_vars: dict[str, str] = {}

    for role, token_name in SEMANTIC_COLOR_ROLES.items():
        color = _string_value(token_map, token_name, TokenType.COLOR)
        if color is None:
            continue
        value = resolve_reference(color, token_map)
        if not is_hex_color(value):
            logger.debug(f"Skipping --{role}: {token_name} is not a hex color ({value})")
            continue
        css_vars[f"--{role}"] = hex_to_hsl(str(value))

    radius = None
    for name in RADIUS_TOKEN_NAMES:
        radius = _string_value(token_map, name, TokenType.BORDER_RADIUS)
        if radius:
            break
    css_vars["--radius"] = str(resolve_reference(radius, token_map)) if radius else radius_fallback

    for role, token_name in SEMANTIC_SPACING_ROLES.items():
        spacing = _string_value(token_map, token_name, TokenType.SPACING)
        if spacing is not None:
            css_vars[f"--{role}"] = str(resolve_reference(spacing, token_map))

    family = _string_value(token_map, FONT_FAMILY_TOKEN_NAME)
    font_stack = f'"{family}", sans-serif' if family else font_fallback
    css_vars["--font-sans"] = font_stack
    css_vars["--font-heading"] = font_stack

    return css_vars


def _render_block(css_vars: Mapping[str, str]) -> str:
    return "\n".join(f"    {key}: {value};" for key, value in css_vars.items())


def generate_css_string(
    css_vars: Mapping[str, str],
    dark_vars: Mapping[str, str] | None = None,
) -> str:
    """
    Render CSS variables as a light/dark stylesheet.

    The ``.dark`` block repeats the light values unless dark_vars is given.
    """
    light = _render_block(css_vars)
    dark = light if dark_vars is None else _render_block(dark_vars)

    return f"""@layer base {{
  :root {{
{light}
  }}

  .dark {{
{dark}
  }}
}}"""
