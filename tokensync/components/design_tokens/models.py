"""
Design tokens component input/output models.

Canonical token records produced by the validator and consumed by the
transformer and CSS variable generator.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Union

# --- Token Types ---


class TokenType(str, Enum):
    """Kinds of design token the pipeline understands."""

    COLOR = "color"
    SPACING = "spacing"
    TYPOGRAPHY = "typography"
    SHADOW = "shadow"
    BORDER_RADIUS = "borderRadius"


class ExportFormat(str, Enum):
    """Shape of a raw token export."""

    W3C = "w3c"
    LEGACY = "legacy"


@dataclass(frozen=True)
class TypographyValue:
    """Composite typography value (one Tailwind fontSize entry)."""

    font_family: str
    font_size: str
    font_weight: str | int | float
    line_height: str
    letter_spacing: str | None = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "fontFamily": self.font_family,
            "fontSize": self.font_size,
            "fontWeight": self.font_weight,
            "lineHeight": self.line_height,
        }
        if self.letter_spacing is not None:
            result["letterSpacing"] = self.letter_spacing
        return result


TokenValue = Union[str, int, float, TypographyValue]


@dataclass(frozen=True)
class DesignToken:
    """A single named, typed design value with a flattened name."""

    name: str
    value: TokenValue
    type: TokenType
    description: str | None = None

    def to_dict(self) -> dict[str, Any]:
        value = self.value.to_dict() if isinstance(self.value, TypographyValue) else self.value
        result: dict[str, Any] = {
            "name": self.name,
            "value": value,
            "type": self.type.value,
        }
        if self.description is not None:
            result["description"] = self.description
        return result


# --- Validation Error ---


class TokenValidationError(Exception):
    """
    Raised when a token export fails structural or type validation.

    All validator failures share this type and differ only by message.
    """

    def __init__(self, message: str, token_name: str | None = None) -> None:
        self.message = message
        self.token_name = token_name
        super().__init__(message)


@dataclass(frozen=True)
class BuildIssue:
    """Failure reported by the build shell instead of raising."""

    code: str
    message: str
    token_name: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class ValidateTokensInput:
    """Input for validating a raw token export."""

    data: Any


@dataclass(frozen=True)
class TransformTokensInput:
    """Input for compiling tokens into a Tailwind theme extension."""

    tokens: list[DesignToken]


@dataclass(frozen=True)
class GenerateCSSInput:
    """Input for generating CSS custom properties."""

    tokens: list[DesignToken]
    radius_fallback: str | None = None
    font_fallback: str | None = None


@dataclass(frozen=True)
class BuildTokensInput:
    """Input for a full build from an export file to generated artifacts."""

    source_path: Path
    output_dir: Path
    theme_module: str | None = "tokens.ts"
    theme_json: str | None = "tokens.json"
    css_file: str | None = "variables.css"
    radius_fallback: str | None = None
    font_fallback: str | None = None


# --- Output Models ---


@dataclass(frozen=True)
class ValidateTokensOutput:
    """Output from validating a token export."""

    tokens: list[DesignToken]
    export_format: ExportFormat | None = None
    errors: list[BuildIssue] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class TransformTokensOutput:
    """Output containing the Tailwind theme extension."""

    theme: dict[str, Any]


@dataclass(frozen=True)
class GenerateCSSOutput:
    """Output containing CSS variables and the rendered stylesheet."""

    variables: dict[str, str]
    stylesheet: str


@dataclass(frozen=True)
class BuildTokensOutput:
    """Output from a full build."""

    token_count: int = 0
    theme: dict[str, Any] = field(default_factory=dict)
    css_variables: dict[str, str] = field(default_factory=dict)
    written: list[Path] = field(default_factory=list)
    errors: list[BuildIssue] = field(default_factory=list)
    success: bool = True
