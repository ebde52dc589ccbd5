"""
Token export validation.

Detects which export shape a raw payload uses (W3C nested or legacy flat),
parses it into flat token records and validates each record against its
type. Validation is strict: the first violation aborts the whole batch.

Invariants:
- Output is never empty; an export with no recognized tokens is an error.
- W3C token names are the hyphen-joined path from the top-level category.
- Individual W3C font leaves under one parent become a single typography token.
"""

from __future__ import annotations

import logging
import math
import re
from collections import Counter
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

from .models import (
    DesignToken,
    ExportFormat,
    TokenType,
    TokenValidationError,
    TypographyValue,
)

logger = logging.getLogger(__name__)

BASE_FONT_SIZE_PX = 16

LEGACY_CATEGORIES = ("colors", "spacing", "typography", "shadows", "radii")

COLOR_PATTERN = re.compile(r"^#[0-9A-Fa-f]{6}([0-9A-Fa-f]{2})?$|^rgb|^hsl|^\{[^}]+\}$")
SPACING_PATTERN = re.compile(r"^\d+(\.\d+)?(px|rem|em)$|^\{[^}]+\}$")
RADIUS_PATTERN = re.compile(r"^\d+(\.\d+)?(px|rem|em|%)$|^\{[^}]+\}$")

FONT_PROPERTY_PATTERN = re.compile(r"^(font-.+)-(family|size|weight|line-height|letter-spacing)$")

# W3C composite-less property types treated like their generic counterparts
TEXT_TYPES = frozenset({"text", "fontFamily"})
NUMBER_TYPES = frozenset({"number", "fontWeight", "fontSize", "lineHeight", "letterSpacing"})


@dataclass(frozen=True)
class _RawToken:
    """Parsed token prior to type validation."""

    name: str
    value: Any
    type: str
    description: str | None = None


@dataclass(frozen=True)
class _FontLeaf:
    """Individual W3C font property awaiting grouping."""

    name: str
    value: Any
    description: str | None = None


# ═══════════════════════════════════════════════════════════════════════════
# HELPERS
# ═══════════════════════════════════════════════════════════════════════════


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _format_number(value: float) -> str:
    """
    Format a number the way a JS template literal would (16.0 -> "16",
    6.25e-05 -> "0.0000625").

    Raises:
        OverflowError: If the value does not fit a finite float
    """
    number = float(value)
    if not math.isfinite(number):
        raise OverflowError(f"{value} is not a finite number")
    if number.is_integer():
        return str(int(number))
    return format(Decimal(repr(number)), "f")


def px_to_rem(value: float) -> str:
    """Convert a unit-less pixel value to rem (8 -> "0.5rem")."""
    return f"{_format_number(value / BASE_FONT_SIZE_PX)}rem"


def _parse_float(value: object) -> float | None:
    number = None
    if _is_number(value):
        number = float(value)  # type: ignore[arg-type]
    elif isinstance(value, str):
        match = re.match(r"^\s*(-?\d+(\.\d+)?)", value)
        if match:
            number = float(match.group(1))
    if number is not None and not math.isfinite(number):
        raise OverflowError(f"{value} is not a finite number")
    return number


def _out_of_range(name: str, error: OverflowError) -> TokenValidationError:
    return TokenValidationError(
        f'Token "{name}" has an out-of-range number: {error}', token_name=name
    )


# ═══════════════════════════════════════════════════════════════════════════
# FORMAT DETECTION
# ═══════════════════════════════════════════════════════════════════════════


def _is_w3c_node(obj: Mapping[str, Any]) -> bool:
    return "$value" in obj and ("$type" in obj or "type" in obj)


def _has_w3c_tokens(obj: object) -> bool:
    if not isinstance(obj, Mapping):
        return False
    if _is_w3c_node(obj):
        return True
    return any(_has_w3c_tokens(value) for value in obj.values())


def classify_export(data: Mapping[str, Any]) -> ExportFormat:
    """
    Decide which export shape a payload uses.

    W3C wins when any non-version top-level entry contains, at any depth,
    a node carrying ``$value`` with a ``$type``/``type``. Everything else is
    treated as the legacy format.
    """
    for key, value in data.items():
        if key == "version":
            continue
        if _has_w3c_tokens(value):
            return ExportFormat.W3C
    return ExportFormat.LEGACY


# ═══════════════════════════════════════════════════════════════════════════
# TYPOGRAPHY GROUPING
# ═══════════════════════════════════════════════════════════════════════════


@dataclass
class _FontGroup:
    name: str
    description: str | None = None
    family: Any = None
    size_px: float | None = None
    weight: Any = None
    line_height_px: float | None = None
    letter_spacing: str | None = None

    @property
    def is_complete(self) -> bool:
        return self.family is not None and self.size_px is not None

    def to_raw_token(self) -> _RawToken:
        line_height = "1.5"
        if self.line_height_px is not None and self.size_px:
            line_height = f"{self.line_height_px / self.size_px:.3f}"

        value: dict[str, Any] = {
            "fontFamily": self.family,
            "fontSize": px_to_rem(self.size_px or 0),
            "fontWeight": self.weight if self.weight is not None else 400,
            "lineHeight": line_height,
        }
        if self.letter_spacing is not None:
            value["letterSpacing"] = self.letter_spacing

        return _RawToken(
            name=self.name,
            value=value,
            type=TokenType.TYPOGRAPHY.value,
            description=self.description,
        )


@dataclass
class _TypographyBuilder:
    """Accumulates font property leaves by parent path."""

    groups: dict[str, _FontGroup] = field(default_factory=dict)

    def add(self, leaf: _FontLeaf) -> bool:
        """Record a leaf. Returns False if the leaf is not a font property."""
        match = FONT_PROPERTY_PATTERN.match(leaf.name)
        if not match:
            return False

        base_name, prop = match.group(1), match.group(2)
        group = self.groups.get(base_name)
        if group is None:
            group = _FontGroup(name=base_name, description=leaf.description)
            self.groups[base_name] = group

        if prop == "family":
            group.family = leaf.value
        elif prop == "size":
            group.size_px = _parse_float(leaf.value)
        elif prop == "weight":
            group.weight = leaf.value
        elif prop == "line-height":
            group.line_height_px = _parse_float(leaf.value)
        elif prop == "letter-spacing":
            if _is_number(leaf.value):
                group.letter_spacing = f"{_format_number(leaf.value)}em"
            else:
                group.letter_spacing = leaf.value
        return True

    def build(self) -> list[_RawToken]:
        tokens = []
        for group in self.groups.values():
            if group.is_complete:
                tokens.append(group.to_raw_token())
            else:
                logger.debug(f"Skipping incomplete typography group: {group.name}")
        return tokens


# ═══════════════════════════════════════════════════════════════════════════
# W3C PARSER
# ═══════════════════════════════════════════════════════════════════════════


def _is_w3c_typography_value(value: object) -> bool:
    if not isinstance(value, Mapping):
        return False
    letter_spacing = value.get("letterSpacing")
    return (
        isinstance(value.get("fontFamily"), str)
        and _is_number(value.get("fontSize"))
        and _is_number(value.get("fontWeight"))
        and _is_number(value.get("lineHeight"))
        and (letter_spacing is None or _is_number(letter_spacing))
    )


def _dimension(value: Any) -> Any:
    return px_to_rem(value) if _is_number(value) else value


def _convert_number(name: str, value: Any, description: str | None) -> _RawToken | _FontLeaf:
    """Classify a bare W3C number by the naming conventions of the exporter."""
    if "space" in name or "margin" in name or "gutter" in name:
        return _RawToken(name, _dimension(value), TokenType.SPACING.value, description)
    if "radius" in name:
        return _RawToken(name, _dimension(value), TokenType.BORDER_RADIUS.value, description)
    if "width" in name and "border" in name:
        width = f"{_format_number(value)}px" if _is_number(value) else value
        return _RawToken(name, width, TokenType.SPACING.value, description)
    if "size" in name and "font" not in name:
        return _RawToken(name, _dimension(value), TokenType.SPACING.value, description)
    return _FontLeaf(name, value, description)


def _convert_w3c_token(
    name: str, node: Mapping[str, Any]
) -> _RawToken | _FontLeaf | None:
    value = node["$value"]
    token_type = node.get("$type") or node.get("type")
    description = node.get("$description")

    if not isinstance(token_type, str):
        logger.debug(f"Skipping token {name} with non-string type: {token_type!r}")
        return None

    if token_type == "color":
        return _RawToken(name, value, TokenType.COLOR.value, description)

    if token_type in ("dimension", "spacing"):
        return _RawToken(name, _dimension(value), TokenType.SPACING.value, description)

    if token_type == "borderRadius":
        return _RawToken(name, _dimension(value), TokenType.BORDER_RADIUS.value, description)

    if token_type == "shadow":
        return _RawToken(name, value, TokenType.SHADOW.value, description)

    if token_type == "typography":
        if not _is_w3c_typography_value(value):
            return None
        typography: dict[str, Any] = {
            "fontFamily": value["fontFamily"],
            "fontSize": px_to_rem(value["fontSize"]),
            "fontWeight": value["fontWeight"],
            "lineHeight": px_to_rem(value["lineHeight"]),
        }
        if value.get("letterSpacing"):
            typography["letterSpacing"] = f"{_format_number(value['letterSpacing'])}em"
        return _RawToken(name, typography, TokenType.TYPOGRAPHY.value, description)

    if token_type in TEXT_TYPES:
        return _FontLeaf(name, value, description)

    if token_type in NUMBER_TYPES:
        return _convert_number(name, value, description)

    logger.debug(f"Skipping token {name} with unsupported type: {token_type}")
    return None


def _walk_w3c(data: Mapping[str, Any], prefix: str = "") -> Iterator[_RawToken | _FontLeaf]:
    for key, value in data.items():
        if key == "version" or not isinstance(value, Mapping):
            continue

        name = f"{prefix}-{key}" if prefix else str(key)

        if _is_w3c_node(value):
            try:
                converted = _convert_w3c_token(name, value)
            except OverflowError as e:
                raise _out_of_range(name, e) from e
            if converted is not None:
                yield converted
        elif "$value" not in value:
            yield from _walk_w3c(value, name)


def parse_w3c_tokens(data: Mapping[str, Any]) -> list[_RawToken]:
    """Flatten a W3C export, coalescing font leaves into typography tokens."""
    tokens: list[_RawToken] = []
    builder = _TypographyBuilder()

    for item in _walk_w3c(data):
        if isinstance(item, _RawToken):
            tokens.append(item)
        else:
            try:
                added = builder.add(item)
            except OverflowError as e:
                raise _out_of_range(item.name, e) from e
            if not added:
                logger.debug(f"Skipping standalone property token: {item.name}")

    tokens.extend(builder.build())
    return tokens


# ═══════════════════════════════════════════════════════════════════════════
# LEGACY PARSER
# ═══════════════════════════════════════════════════════════════════════════


def parse_legacy_tokens(data: Mapping[str, Any]) -> list[_RawToken]:
    """Flatten a legacy export with a top-level ``tokens`` object."""
    groups = data.get("tokens")
    if not isinstance(groups, Mapping):
        raise TokenValidationError('Token data must have a "tokens" property')

    tokens: list[_RawToken] = []
    for category in LEGACY_CATEGORIES:
        entries = groups.get(category)
        if not entries:
            continue
        if not isinstance(entries, Mapping):
            raise TokenValidationError(f'Token category "{category}" must be an object')

        for name, entry in entries.items():
            if not isinstance(entry, Mapping):
                raise TokenValidationError(
                    f'Token "{name}" must be an object with "value" and "type"',
                    token_name=name,
                )
            token_type = entry.get("type")
            value = entry.get("value")
            if token_type in (TokenType.SPACING.value, TokenType.BORDER_RADIUS.value):
                try:
                    value = _dimension(value)
                except OverflowError as e:
                    raise _out_of_range(name, e) from e
            tokens.append(_RawToken(name, value, token_type, entry.get("description")))

    return tokens


# ═══════════════════════════════════════════════════════════════════════════
# TYPE VALIDATION
# ═══════════════════════════════════════════════════════════════════════════


def _is_typography_value(value: object) -> bool:
    if not isinstance(value, Mapping):
        return False
    weight = value.get("fontWeight")
    letter_spacing = value.get("letterSpacing")
    return (
        isinstance(value.get("fontFamily"), str)
        and isinstance(value.get("fontSize"), str)
        and (isinstance(weight, str) or _is_number(weight))
        and isinstance(value.get("lineHeight"), str)
        and (letter_spacing is None or isinstance(letter_spacing, str))
    )


def _validate_raw_token(raw: _RawToken) -> DesignToken:
    name, value, token_type = raw.name, raw.value, raw.type

    if token_type == TokenType.COLOR:
        if not isinstance(value, str):
            raise TokenValidationError(
                f'Color token "{name}" must have a string value', token_name=name
            )
        if not COLOR_PATTERN.search(value):
            raise TokenValidationError(
                f'Color token "{name}" has invalid color format: {value}', token_name=name
            )
        return DesignToken(name, value, TokenType.COLOR, raw.description)

    if token_type == TokenType.SPACING:
        if not isinstance(value, str):
            raise TokenValidationError(
                f'Spacing token "{name}" must have a string value', token_name=name
            )
        if not SPACING_PATTERN.search(value):
            raise TokenValidationError(
                f'Spacing token "{name}" has invalid spacing format: {value}', token_name=name
            )
        return DesignToken(name, value, TokenType.SPACING, raw.description)

    if token_type == TokenType.TYPOGRAPHY:
        if not _is_typography_value(value):
            raise TokenValidationError(
                f'Typography token "{name}" must have a valid typography value object',
                token_name=name,
            )
        typography = TypographyValue(
            font_family=value["fontFamily"],
            font_size=value["fontSize"],
            font_weight=value["fontWeight"],
            line_height=value["lineHeight"],
            letter_spacing=value.get("letterSpacing"),
        )
        return DesignToken(name, typography, TokenType.TYPOGRAPHY, raw.description)

    if token_type == TokenType.SHADOW:
        if not isinstance(value, str):
            raise TokenValidationError(
                f'Shadow token "{name}" must have a string value', token_name=name
            )
        return DesignToken(name, value, TokenType.SHADOW, raw.description)

    if token_type == TokenType.BORDER_RADIUS:
        if not isinstance(value, str):
            raise TokenValidationError(
                f'Border radius token "{name}" must have a string value', token_name=name
            )
        if not RADIUS_PATTERN.search(value):
            raise TokenValidationError(
                f'Border radius token "{name}" has invalid format: {value}', token_name=name
            )
        return DesignToken(name, value, TokenType.BORDER_RADIUS, raw.description)

    raise TokenValidationError(f"Unknown token type: {token_type}", token_name=name)


# ═══════════════════════════════════════════════════════════════════════════
# ENTRY POINT
# ═══════════════════════════════════════════════════════════════════════════


def validate_export(data: object) -> tuple[ExportFormat, list[DesignToken]]:
    """
    Validate a raw token export, reporting the shape it was parsed as.

    Args:
        data: Decoded JSON export in W3C or legacy shape

    Returns:
        The detected export format and a non-empty list of validated tokens

    Raises:
        TokenValidationError: On the first structural or type violation
    """
    if not isinstance(data, Mapping):
        raise TokenValidationError("Token data must be an object")

    export_format = classify_export(data)
    if export_format is ExportFormat.W3C:
        raw_tokens = parse_w3c_tokens(data)
    else:
        raw_tokens = parse_legacy_tokens(data)

    if not raw_tokens:
        raise TokenValidationError("No valid tokens found in token data")

    tokens = [_validate_raw_token(raw) for raw in raw_tokens]

    counts = Counter(token.name for token in tokens)
    duplicates = sorted(name for name, count in counts.items() if count > 1)
    if duplicates:
        logger.warning(f"Duplicate token names (last one wins): {', '.join(duplicates)}")

    return export_format, tokens


def validate_tokens(data: object) -> list[DesignToken]:
    """
    Validate a raw token export and return normalized tokens.

    Raises:
        TokenValidationError: On the first structural or type violation
    """
    _, tokens = validate_export(data)
    return tokens
