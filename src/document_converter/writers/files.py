"""Output file helpers shared by the writers."""

from __future__ import annotations

import os
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from ..domain import DestinationUnavailable


def ensure_parent(destination: Path) -> None:
    if not destination.parent.is_dir():
        raise DestinationUnavailable("Output directory does not exist", path=str(destination))


@contextmanager
def atomic_output(destination: str | Path) -> Iterator[Path]:
    """Yield a temporary path that replaces ``destination`` only on success.

    The temporary file lives next to the destination so the final rename
    stays on one filesystem. It is removed on every exit path.
    """

    target = Path(destination)
    ensure_parent(target)
    try:
        fd, temp_name = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".tmp", dir=target.parent)
    except OSError as exc:
        raise DestinationUnavailable(f"Cannot create output file: {exc}", path=str(target)) from exc
    os.close(fd)

    temp_path = Path(temp_name)
    try:
        yield temp_path
        try:
            os.replace(temp_path, target)
        except OSError as exc:
            raise DestinationUnavailable(f"Cannot write output file: {exc}", path=str(target)) from exc
    finally:
        temp_path.unlink(missing_ok=True)


def write_text(destination: str | Path, text: str) -> Path:
    """Write UTF-8 text atomically."""

    target = Path(destination)
    with atomic_output(target) as temp_path:
        try:
            temp_path.write_text(text, encoding="utf-8")
        except OSError as exc:
            raise DestinationUnavailable(f"Cannot write output file: {exc}", path=str(target)) from exc
    return target


__all__ = ["atomic_output", "ensure_parent", "write_text"]
