"""Local filesystem backend implementing IFileStore."""

from __future__ import annotations

import contextlib
import logging
from pathlib import Path

from conversorxml.core.exceptions import InputReadError, WriteFailureError

logger = logging.getLogger(__name__)


class LocalFileStore:
    """Production IFileStore rooted at a directory; absolute paths pass through."""

    def __init__(self, root: str = ".") -> None:
        self._root = Path(root)

    def _resolve(self, path: str) -> Path:
        candidate = Path(path)
        return candidate if candidate.is_absolute() else self._root / candidate

    def read(self, path: str) -> bytes:
        try:
            return self._resolve(path).read_bytes()
        except OSError as exc:
            raise InputReadError(f"Cannot read {path!r}: {exc}") from exc

    def write(self, path: str, data: bytes) -> str:
        target = self._resolve(path)
        try:
            handle = open(target, "wb")
        except OSError as exc:
            raise WriteFailureError(f"Cannot create {path!r}: {exc}") from exc
        try:
            with handle:
                handle.write(data)
        except OSError as exc:
            # Never leave a truncated CSV behind.
            with contextlib.suppress(OSError):
                target.unlink()
            raise WriteFailureError(f"Write to {path!r} failed: {exc}") from exc
        logger.debug("Wrote %d bytes to %s", len(data), target)
        return path

    def exists(self, path: str) -> bool:
        return self._resolve(path).is_file()

    def list_files(self, pattern: str) -> list[str]:
        return sorted(
            str(p.relative_to(self._root))
            for p in self._root.glob(pattern)
            if p.is_file()
        )
