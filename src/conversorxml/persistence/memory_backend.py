"""In-memory backend for unit tests — dict-backed fake."""

from __future__ import annotations

import fnmatch

from conversorxml.core.exceptions import InputReadError, WriteFailureError


class MemoryFileStore:
    """Dict-backed IFileStore for unit tests.

    Set ``fail_writes`` to simulate a full or read-only destination.
    """

    def __init__(self, files: dict[str, bytes] | None = None) -> None:
        self._files: dict[str, bytes] = dict(files or {})
        self.fail_writes = False

    def read(self, path: str) -> bytes:
        try:
            return self._files[path]
        except KeyError:
            raise InputReadError(f"Cannot read {path!r}: no such file") from None

    def write(self, path: str, data: bytes) -> str:
        if self.fail_writes:
            raise WriteFailureError(f"Write to {path!r} failed: simulated failure")
        self._files[path] = data
        return path

    def exists(self, path: str) -> bool:
        return path in self._files

    def list_files(self, pattern: str) -> list[str]:
        return sorted(k for k in self._files if fnmatch.fnmatchcase(k, pattern))
