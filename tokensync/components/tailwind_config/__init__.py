"""
Tailwind config component - Merge design tokens into a Tailwind config.
"""

from .component import build_tailwind_config, load_design_tokens, with_theme

__all__ = [
    "build_tailwind_config",
    "load_design_tokens",
    "with_theme",
]
