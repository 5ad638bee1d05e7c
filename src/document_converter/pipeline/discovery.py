"""Find input files eligible for a conversion mode."""

from __future__ import annotations

from pathlib import Path
from typing import List

from ..domain import ConversionMode


def discover_sources(directory: str | Path, mode: ConversionMode) -> List[Path]:
    """List files in ``directory`` whose extension suits ``mode``, sorted by name."""

    root = Path(directory)
    if not root.is_dir():
        return []
    extensions = mode.source_extensions
    return sorted(
        (entry for entry in root.iterdir() if entry.is_file() and entry.suffix.lower() in extensions),
        key=lambda entry: entry.name.lower(),
    )


__all__ = ["discover_sources"]
