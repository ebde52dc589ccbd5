"""
Token reference resolution.

Resolves ``{path.to.token}`` values against the flattened token set, with a
fallback table for references the exporter leaves dangling.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from .models import DesignToken, TokenValue

logger = logging.getLogger(__name__)

REFERENCE_PATTERN = re.compile(r"^\{(.+)\}$")

# Cross-file references the exporter does not flatten into the token set.
TOKEN_REFERENCE_MAP: Mapping[str, str] = MappingProxyType(
    {
        "{font.letter-spacing.0}": "0",
        "{border.width.none}": "0",
        "{border.radius.none}": "0",
        "{space.0}": "0",
        "{color.status.error}": "#e90932",
    }
)


def is_reference(value: object) -> bool:
    """Return True if value is a ``{...}`` token reference."""
    return isinstance(value, str) and REFERENCE_PATTERN.match(value) is not None


def build_token_map(tokens: Iterable[DesignToken]) -> dict[str, DesignToken]:
    """Index tokens by name. Later tokens overwrite earlier ones."""
    return {token.name: token for token in tokens}


def _lookup(path: str, token_map: Mapping[str, DesignToken]) -> DesignToken | None:
    token = token_map.get(path)
    if token is None and "." in path:
        token = token_map.get(path.replace(".", "-"))
    return token


def resolve_reference(
    value: TokenValue | None,
    token_map: Mapping[str, DesignToken],
    _seen: frozenset[str] = frozenset(),
) -> TokenValue | None:
    """
    Resolve a token reference to its final value.

    Args:
        value: Raw token value. Non-reference values pass through unchanged.
        token_map: Flattened token names mapped to tokens.

    Returns:
        The resolved value, or the original ``{...}`` string when the
        reference cannot be resolved.
    """
    if not isinstance(value, str):
        return value

    match = REFERENCE_PATTERN.match(value)
    if not match:
        return value

    if value in TOKEN_REFERENCE_MAP:
        return TOKEN_REFERENCE_MAP[value]

    path = match.group(1)
    if path in _seen:
        logger.warning(f"Circular token reference: {value}")
        return value

    referenced = _lookup(path, token_map)
    if referenced is not None:
        return resolve_reference(referenced.value, token_map, _seen | {path})

    logger.warning(f"Could not resolve token reference: {value}")
    return value
