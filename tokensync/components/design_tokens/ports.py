"""
Design tokens component port definitions.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol


class TokenSourcePort(Protocol):
    """Port for reading a design-token export."""

    def exists(self, path: Path) -> bool:
        """Check if the export exists."""
        ...

    def read_json(self, path: Path) -> Any:
        """Read and decode a JSON export."""
        ...


class ArtifactWriterPort(Protocol):
    """Port for writing generated theme artifacts."""

    def ensure_dir(self, path: Path) -> None:
        """Create a directory (and parents) if missing."""
        ...

    def write_text(self, path: Path, content: str) -> None:
        """Write a UTF-8 text file, replacing any previous content."""
        ...
