"""
Design tokens component - compile a design-tool export into theme artifacts.

Reads a token export, validates it, then produces two independent views of
the same token list: a Tailwind theme extension and a CSS variable block.

Invariants:
- I1: Validation is fail-fast; nothing is written for an invalid export
- I2: Transformation and CSS generation never abort a build
- I3: Artifacts are regenerated wholesale on every run
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from .css_variables import (
    DEFAULT_FONT_STACK,
    DEFAULT_RADIUS,
    generate_css_string,
    generate_css_variables,
)
from .models import (
    BuildIssue,
    BuildTokensInput,
    BuildTokensOutput,
    GenerateCSSInput,
    GenerateCSSOutput,
    TokenValidationError,
    TransformTokensInput,
    TransformTokensOutput,
    ValidateTokensInput,
    ValidateTokensOutput,
)
from .ports import ArtifactWriterPort, TokenSourcePort
from .transform import transform_tokens
from .validators import validate_export

logger = logging.getLogger(__name__)

THEME_MODULE_HEADER = """// This file is auto-generated. Do not edit manually.
import type { TailwindThemeExtension } from './types';
"""


def render_theme_module(theme: dict[str, Any]) -> str:
    """Render the theme extension as a TypeScript module for the Tailwind config."""
    body = json.dumps(theme, indent=2, ensure_ascii=False)
    return f"{THEME_MODULE_HEADER}\nexport const designTokens: TailwindThemeExtension = {body};\n"


# --- Component Entry Points ---


def run_validate(inp: ValidateTokensInput) -> ValidateTokensOutput:
    """
    Validate a raw export.

    Args:
        inp: Input containing the decoded export.

    Returns:
        ValidateTokensOutput with tokens, or errors when validation fails.
    """
    try:
        export_format, tokens = validate_export(inp.data)
    except TokenValidationError as e:
        return ValidateTokensOutput(
            tokens=[],
            errors=[BuildIssue(code="validation_failed", message=e.message, token_name=e.token_name)],
            success=False,
        )

    return ValidateTokensOutput(
        tokens=tokens,
        export_format=export_format,
        errors=[],
        success=True,
    )


def run_transform(inp: TransformTokensInput) -> TransformTokensOutput:
    """Compile validated tokens into a Tailwind theme extension."""
    return TransformTokensOutput(theme=transform_tokens(inp.tokens))


def run_generate_css(inp: GenerateCSSInput) -> GenerateCSSOutput:
    """Generate CSS variables and the light/dark stylesheet."""
    variables = generate_css_variables(
        inp.tokens,
        radius_fallback=inp.radius_fallback or DEFAULT_RADIUS,
        font_fallback=inp.font_fallback or DEFAULT_FONT_STACK,
    )
    return GenerateCSSOutput(variables=variables, stylesheet=generate_css_string(variables))


def _failure(code: str, message: str, token_name: str | None = None) -> BuildTokensOutput:
    return BuildTokensOutput(
        errors=[BuildIssue(code=code, message=message, token_name=token_name)],
        success=False,
    )


def run_build(
    inp: BuildTokensInput,
    *,
    source: TokenSourcePort,
    writer: ArtifactWriterPort,
) -> BuildTokensOutput:
    """
    Build theme artifacts from a token export.

    Args:
        inp: Input containing source path, output directory and file names.
        source: Port for reading the export.
        writer: Port for writing generated files.

    Returns:
        BuildTokensOutput with the compiled theme, CSS variables and the
        paths written, or errors.
    """
    source_path = Path(inp.source_path)
    if not source.exists(source_path):
        return _failure("source_not_found", f"Token export not found: {source_path}")

    try:
        data = source.read_json(source_path)
    except (OSError, ValueError) as e:
        return _failure("source_invalid", f"Failed to read token export: {e}")

    validated = run_validate(ValidateTokensInput(data=data))
    if not validated.success:
        return BuildTokensOutput(errors=validated.errors, success=False)

    tokens = validated.tokens
    logger.info(f"Found {len(tokens)} valid tokens ({validated.export_format.value} format)")

    theme = run_transform(TransformTokensInput(tokens=tokens)).theme
    css = run_generate_css(
        GenerateCSSInput(
            tokens=tokens,
            radius_fallback=inp.radius_fallback,
            font_fallback=inp.font_fallback,
        )
    )

    artifacts: list[tuple[str | None, str]] = [
        (inp.theme_module, render_theme_module(theme)),
        (inp.theme_json, json.dumps(theme, indent=2, ensure_ascii=False) + "\n"),
        (inp.css_file, css.stylesheet),
    ]

    output_dir = Path(inp.output_dir)
    written: list[Path] = []
    try:
        writer.ensure_dir(output_dir)
        for filename, content in artifacts:
            if not filename:
                continue
            path = output_dir / filename
            writer.write_text(path, content)
            logger.info(f"Generated {path}")
            written.append(path)
    except OSError as e:
        return _failure("write_failed", f"Failed to write artifacts: {e}")

    return BuildTokensOutput(
        token_count=len(tokens),
        theme=theme,
        css_variables=css.variables,
        written=written,
        errors=[],
        success=True,
    )
