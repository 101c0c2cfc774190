"""Protocol interfaces for the converter's pluggable collaborators.

Structural typing, no inheritance required, easy to test with isinstance().
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


# ---------------------------------------------------------------------------
# Persistence: File Store
# ---------------------------------------------------------------------------

@runtime_checkable
class IFileStore(Protocol):
    """Byte-oriented file storage interface."""

    def read(self, path: str) -> bytes: ...

    def write(self, path: str, data: bytes) -> str: ...

    def exists(self, path: str) -> bool: ...

    def list_files(self, pattern: str) -> list[str]: ...
