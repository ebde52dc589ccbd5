"""
Tailwind config component - merge generated design tokens into a base config.

Token loading is best-effort: a config without tokens is still usable, so a
missing or unreadable tokens file degrades to an empty extension.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


def load_design_tokens(path: Path) -> dict[str, Any]:
    """
    Read a generated theme extension (tokens.json).

    Returns:
        The theme extension, or {} when the file is missing or unreadable.
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning(f"Design tokens not found at {path}; run `tokensync build` first ({e})")
        return {}

    if not isinstance(data, dict):
        logger.warning(f"Design tokens at {path} are not an object; ignoring")
        return {}
    return data


def _extend(config: Mapping[str, Any], extensions: Mapping[str, Any]) -> dict[str, Any]:
    theme = dict(config.get("theme") or {})
    theme["extend"] = {**(theme.get("extend") or {}), **extensions}
    return {**config, "theme": theme}


def build_tailwind_config(
    base_config: Mapping[str, Any],
    design_tokens: Mapping[str, Any],
) -> dict[str, Any]:
    """Return base_config with the design tokens merged into theme.extend."""
    return _extend(base_config, design_tokens)


def with_theme(config: Mapping[str, Any], extensions: Mapping[str, Any]) -> dict[str, Any]:
    """Merge application-specific theme extensions. Inputs are not mutated."""
    return _extend(config, extensions)
