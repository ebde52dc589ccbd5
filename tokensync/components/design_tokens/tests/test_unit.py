"""
Design tokens component unit tests.

Tests for validate, transform, CSS generation and build entry points.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from tokensync.components.design_tokens import (
    BuildTokensInput,
    DesignToken,
    ExportFormat,
    GenerateCSSInput,
    TokenType,
    TransformTokensInput,
    ValidateTokensInput,
    render_theme_module,
    run_build,
    run_generate_css,
    run_transform,
    run_validate,
)

# --- Mock Implementations ---


class MockTokenSource:
    """In-memory token export source for testing."""

    def __init__(self, files: dict[Path, Any] | None = None) -> None:
        self._files = files or {}
        self.fail_with: Exception | None = None

    def exists(self, path: Path) -> bool:
        return path in self._files

    def read_json(self, path: Path) -> Any:
        if self.fail_with is not None:
            raise self.fail_with
        return self._files[path]


class MockArtifactWriter:
    """In-memory artifact writer for testing."""

    def __init__(self) -> None:
        self.dirs: list[Path] = []
        self.files: dict[Path, str] = {}
        self.fail = False

    def ensure_dir(self, path: Path) -> None:
        self.dirs.append(path)

    def write_text(self, path: Path, content: str) -> None:
        if self.fail:
            raise PermissionError(f"read-only: {path}")
        self.files[path] = content


# --- Fixtures ---

SOURCE = Path("tokens/figma.json")
OUT_DIR = Path("out")


@pytest.fixture
def w3c_export() -> dict[str, Any]:
    return {
        "colour": {
            "button": {"primary": {"default": {"$type": "color", "$value": "#ff0000"}}},
        },
        "space": {"01": {"$type": "number", "$value": 8}},
    }


@pytest.fixture
def source(w3c_export: dict[str, Any]) -> MockTokenSource:
    return MockTokenSource({SOURCE: w3c_export})


@pytest.fixture
def writer() -> MockArtifactWriter:
    return MockArtifactWriter()


# --- run_validate ---


class TestRunValidate:
    """Test the validate entry point."""

    def test_valid_export_reports_format(self, w3c_export: dict[str, Any]) -> None:
        """Valid export returns tokens and the detected format."""
        result = run_validate(ValidateTokensInput(data=w3c_export))

        assert result.success is True
        assert result.export_format is ExportFormat.W3C
        assert [t.name for t in result.tokens] == ["colour-button-primary-default", "space-01"]

    def test_legacy_export_reports_format(self) -> None:
        data = {"tokens": {"colors": {"primary": {"value": "#000000", "type": "color"}}}}

        result = run_validate(ValidateTokensInput(data=data))

        assert result.export_format is ExportFormat.LEGACY
        assert [t.name for t in result.tokens] == ["primary"]

    def test_unhashable_type_reported(self) -> None:
        """A list-valued $type is skipped, leaving a validation issue."""
        data = {"color": {"primary": {"$value": "#000000", "$type": ["color"]}}}

        result = run_validate(ValidateTokensInput(data=data))

        assert result.success is False
        assert result.errors[0].code == "validation_failed"

    def test_invalid_export_becomes_issue(self) -> None:
        """Validation errors are reported, not raised."""
        result = run_validate(ValidateTokensInput(data=[]))

        assert result.success is False
        assert result.tokens == []
        assert result.errors[0].code == "validation_failed"
        assert result.errors[0].message == "Token data must be an object"

    def test_issue_carries_token_name(self) -> None:
        """The offending token name is attached to the issue."""
        data = {"tokens": {"colors": {"brand": {"value": 42, "type": "color"}}}}

        result = run_validate(ValidateTokensInput(data=data))

        assert result.errors[0].token_name == "brand"


# --- run_transform / run_generate_css ---


class TestRunTransform:
    def test_wraps_theme(self) -> None:
        tokens = [DesignToken("color-primary", "#3b82f6", TokenType.COLOR)]

        result = run_transform(TransformTokensInput(tokens=tokens))

        assert result.theme == {"colors": {"primary": "#3b82f6"}}


class TestRunGenerateCSS:
    """Test CSS generation entry point."""

    def test_defaults_used_without_overrides(self) -> None:
        result = run_generate_css(GenerateCSSInput(tokens=[]))

        assert result.variables["--radius"] == "0.5rem"
        assert result.variables["--font-sans"] == '"Albert Sans", sans-serif'
        assert result.stylesheet.startswith("@layer base {")

    def test_overrides_applied(self) -> None:
        result = run_generate_css(
            GenerateCSSInput(tokens=[], radius_fallback="1rem", font_fallback="system-ui")
        )

        assert result.variables["--radius"] == "1rem"
        assert result.variables["--font-heading"] == "system-ui"


# --- run_build ---


class TestRunBuild:
    """Test the full build entry point."""

    def test_writes_all_artifacts(
        self, source: MockTokenSource, writer: MockArtifactWriter
    ) -> None:
        """A successful build writes the theme module, theme JSON and stylesheet."""
        result = run_build(
            BuildTokensInput(source_path=SOURCE, output_dir=OUT_DIR),
            source=source,
            writer=writer,
        )

        assert result.success is True
        assert result.token_count == 2
        assert result.written == [
            OUT_DIR / "tokens.ts",
            OUT_DIR / "tokens.json",
            OUT_DIR / "variables.css",
        ]
        assert writer.dirs == [OUT_DIR]
        assert result.theme == {
            "colors": {"button-primary-default": "#ff0000"},
            "spacing": {"space-01": "0.5rem"},
        }
        assert result.css_variables["--primary"] == "0 100% 50%"
        assert result.css_variables["--spacing-xs"] == "0.5rem"
        assert "--primary: 0 100% 50%;" in writer.files[OUT_DIR / "variables.css"]

    def test_theme_module_format(
        self, source: MockTokenSource, writer: MockArtifactWriter
    ) -> None:
        """The theme module carries the generated header and export."""
        run_build(
            BuildTokensInput(source_path=SOURCE, output_dir=OUT_DIR),
            source=source,
            writer=writer,
        )

        module = writer.files[OUT_DIR / "tokens.ts"]
        assert module.startswith("// This file is auto-generated. Do not edit manually.\n")
        assert "import type { TailwindThemeExtension } from './types';" in module
        assert "export const designTokens: TailwindThemeExtension = {" in module
        assert module.rstrip().endswith("};")

    def test_unset_artifacts_skipped(
        self, source: MockTokenSource, writer: MockArtifactWriter
    ) -> None:
        result = run_build(
            BuildTokensInput(
                source_path=SOURCE,
                output_dir=OUT_DIR,
                theme_module=None,
                theme_json=None,
            ),
            source=source,
            writer=writer,
        )

        assert result.written == [OUT_DIR / "variables.css"]
        assert list(writer.files) == [OUT_DIR / "variables.css"]

    def test_missing_source(self, writer: MockArtifactWriter) -> None:
        """Missing export yields source_not_found and writes nothing."""
        result = run_build(
            BuildTokensInput(source_path=SOURCE, output_dir=OUT_DIR),
            source=MockTokenSource(),
            writer=writer,
        )

        assert result.success is False
        assert result.errors[0].code == "source_not_found"
        assert writer.files == {}

    def test_unreadable_source(
        self, source: MockTokenSource, writer: MockArtifactWriter
    ) -> None:
        source.fail_with = ValueError("Expecting value: line 1 column 1 (char 0)")

        result = run_build(
            BuildTokensInput(source_path=SOURCE, output_dir=OUT_DIR),
            source=source,
            writer=writer,
        )

        assert result.errors[0].code == "source_invalid"
        assert "Expecting value" in result.errors[0].message

    def test_invalid_export_writes_nothing(self, writer: MockArtifactWriter) -> None:
        """Validation failure aborts before any artifact is written."""
        source = MockTokenSource({SOURCE: {"tokens": {}}})

        result = run_build(
            BuildTokensInput(source_path=SOURCE, output_dir=OUT_DIR),
            source=source,
            writer=writer,
        )

        assert result.success is False
        assert result.errors[0].code == "validation_failed"
        assert result.errors[0].message == "No valid tokens found in token data"
        assert writer.files == {}
        assert writer.dirs == []

    def test_write_failure(self, source: MockTokenSource, writer: MockArtifactWriter) -> None:
        writer.fail = True

        result = run_build(
            BuildTokensInput(source_path=SOURCE, output_dir=OUT_DIR),
            source=source,
            writer=writer,
        )

        assert result.success is False
        assert result.errors[0].code == "write_failed"


class TestRenderThemeModule:
    def test_empty_theme(self) -> None:
        module = render_theme_module({})

        assert module.endswith("export const designTokens: TailwindThemeExtension = {};\n")
