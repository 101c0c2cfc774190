"""Converter exception hierarchy."""

from __future__ import annotations


class ConverterError(Exception):
    """Base exception for all conversion errors."""


class NoInputFoundError(ConverterError):
    """No candidate XML files in the input directory."""

    def __init__(self, directory: str, pattern: str) -> None:
        self.directory = directory
        self.pattern = pattern
        super().__init__(f"No files matching {pattern!r} found in {directory!r}")


class UnsupportedSchemaError(ConverterError):
    """Filename prefix does not name a supported document variant."""

    def __init__(self, stem: str, prefix: str) -> None:
        self.stem = stem
        self.prefix = prefix
        super().__init__(
            f"Unsupported file type {prefix!r} (from {stem!r}); "
            "expected a name starting with 'comissao_' or 'vales_'"
        )


class InputReadError(ConverterError):
    """Input document could not be read."""


class MalformedDocumentError(ConverterError):
    """XML is not well-formed or is missing a required field."""


class SchemaMismatchError(MalformedDocumentError):
    """Document root does not match the variant chosen from the filename."""

    def __init__(self, expected: str, found: str) -> None:
        self.expected = expected
        self.found = found
        super().__init__(
            f"Expected root element <{expected}> but found <{found}>; "
            "check that the filename prefix matches the document type"
        )


class WriteFailureError(ConverterError):
    """Destination file could not be created or fully written."""
