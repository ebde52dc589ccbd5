"""
Design tokens component - Validate a design-tool export and compile it into
a Tailwind theme extension and CSS custom properties.
"""

from .colors import hex_to_hsl, is_hex_color
from .component import (
    render_theme_module,
    run_build,
    run_generate_css,
    run_transform,
    run_validate,
)
from .css_variables import (
    DEFAULT_FONT_STACK,
    DEFAULT_RADIUS,
    SEMANTIC_COLOR_ROLES,
    SEMANTIC_SPACING_ROLES,
    generate_css_string,
    generate_css_variables,
)
from .models import (
    BuildIssue,
    BuildTokensInput,
    BuildTokensOutput,
    DesignToken,
    ExportFormat,
    GenerateCSSInput,
    GenerateCSSOutput,
    TokenType,
    TokenValidationError,
    TokenValue,
    TransformTokensInput,
    TransformTokensOutput,
    TypographyValue,
    ValidateTokensInput,
    ValidateTokensOutput,
)
from .ports import ArtifactWriterPort, TokenSourcePort
from .references import TOKEN_REFERENCE_MAP, build_token_map, is_reference, resolve_reference
from .transform import transform_tokens
from .validators import classify_export, px_to_rem, validate_export, validate_tokens

__all__ = [
    # Entry points
    "run_build",
    "run_generate_css",
    "run_transform",
    "run_validate",
    "render_theme_module",
    # Pure core
    "classify_export",
    "validate_export",
    "validate_tokens",
    "transform_tokens",
    "generate_css_variables",
    "generate_css_string",
    "resolve_reference",
    "build_token_map",
    "is_reference",
    "hex_to_hsl",
    "is_hex_color",
    "px_to_rem",
    # Tables
    "DEFAULT_FONT_STACK",
    "DEFAULT_RADIUS",
    "SEMANTIC_COLOR_ROLES",
    "SEMANTIC_SPACING_ROLES",
    "TOKEN_REFERENCE_MAP",
    # Token models
    "DesignToken",
    "ExportFormat",
    "TokenType",
    "TokenValue",
    "TypographyValue",
    "TokenValidationError",
    # Input models
    "BuildTokensInput",
    "GenerateCSSInput",
    "TransformTokensInput",
    "ValidateTokensInput",
    # Output models
    "BuildIssue",
    "BuildTokensOutput",
    "GenerateCSSOutput",
    "TransformTokensOutput",
    "ValidateTokensOutput",
    # Ports
    "ArtifactWriterPort",
    "TokenSourcePort",
]
