"""
File system adapters for the design tokens component.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any


class LocalFileSystemAdapter:
    """Adapter for local file system operations."""

    def exists(self, path: Path) -> bool:
        """Check if a file exists."""
        return path.exists()

    def read_json(self, path: Path) -> Any:
        """Read and parse a JSON file."""
        with open(path, encoding="utf-8") as f:
            return json.load(f)

    def ensure_dir(self, path: Path) -> None:
        """Create a directory and any missing parents."""
        path.mkdir(parents=True, exist_ok=True)

    def write_text(self, path: Path, content: str) -> None:
        """Write a UTF-8 text file."""
        path.write_text(content, encoding="utf-8")


# Default adapter instance
default_filesystem = LocalFileSystemAdapter()
