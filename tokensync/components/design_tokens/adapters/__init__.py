"""
Adapters for the design tokens component.
"""

from .filesystem import LocalFileSystemAdapter, default_filesystem

__all__ = [
    "LocalFileSystemAdapter",
    "default_filesystem",
]
