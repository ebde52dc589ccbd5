import json
from pathlib import Path
from typing import Any

import pytest


@pytest.fixture
def w3c_export() -> dict[str, Any]:
    """
    A W3C export shaped like the design tool's output: nested groups,
    a version key, references and individually typed font leaves.
    """
    return {
        "version": "1.0.0",
        "colour": {
            "button": {
                "primary": {"default": {"$type": "color", "$value": "#0f62fe"}},
            },
            "text": {
                "primary": {"$type": "color", "$value": "#161616"},
                "secondary": {"$type": "color", "$value": "#525252"},
                "inverse": {"$type": "color", "$value": "#ffffff"},
            },
            "border": {
                "default": {"$type": "color", "$value": "{colour.text.secondary}"},
            },
            "status": {
                "error": {"$type": "color", "$value": "{color.status.error}"},
            },
        },
        "space": {
            "01": {"$type": "number", "$value": 2},
            "02": {"$type": "number", "$value": 4},
        },
        "border": {
            "radius": {"$default": {"$type": "number", "$value": 4}},
            "width": {"thin": {"$type": "number", "$value": 1}},
        },
        "font": {
            "heading": {
                "family": {"$type": "fontFamily", "$value": "Albert Sans"},
                "size": {"$type": "fontSize", "$value": 32},
                "weight": {"$type": "fontWeight", "$value": 700},
                "line-height": {"$type": "lineHeight", "$value": 40},
            },
        },
        "shadow": {
            "card": {"$type": "shadow", "$value": "0 1px 2px rgba(0, 0, 0, 0.1)"},
        },
    }


@pytest.fixture
def legacy_export() -> dict[str, Any]:
    """A legacy export with a top-level tokens object partitioned by category."""
    return {
        "tokens": {
            "colors": {
                "color-primary": {"value": "#3b82f6", "type": "color"},
                "color-accent": {"value": "{color-primary}", "type": "color"},
            },
            "spacing": {
                "spacing-sm": {"value": 8, "type": "spacing"},
                "spacing-lg": {"value": "2rem", "type": "spacing"},
            },
            "typography": {
                "heading": {
                    "value": {
                        "fontFamily": "Inter, sans-serif",
                        "fontSize": "2rem",
                        "fontWeight": 700,
                        "lineHeight": "2.5rem",
                        "letterSpacing": "-0.02em",
                    },
                    "type": "typography",
                },
            },
            "shadows": {
                "shadow-sm": {"value": "0 1px 2px rgba(0,0,0,0.05)", "type": "shadow"},
            },
            "radii": {
                "radius-md": {"value": 6, "type": "borderRadius"},
            },
        }
    }


@pytest.fixture
def write_json(tmp_path: Path):
    """Write a JSON payload under tmp_path and return its path."""

    def _write(name: str, payload: Any) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _write
