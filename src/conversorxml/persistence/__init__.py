"""Pluggable file storage backends behind the IFileStore protocol."""

from __future__ import annotations

from conversorxml.core.config import AppSettings
from conversorxml.persistence.local_backend import LocalFileStore


def create_file_store(settings: AppSettings | None = None) -> LocalFileStore:
    """Create the file store the CLI reads inputs from and writes CSVs to."""
    if settings is None:
        settings = AppSettings()
    return LocalFileStore(root=settings.cli.input_dir)
