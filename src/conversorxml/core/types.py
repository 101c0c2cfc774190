"""Type aliases used across the converter."""

from __future__ import annotations

OutputRow = tuple[str, ...]
FileStem = str
