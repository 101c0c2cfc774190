"""Picks the document variant from the input filename."""

from __future__ import annotations

from pathlib import PurePath

from conversorxml.core.exceptions import UnsupportedSchemaError
from conversorxml.core.types import FileStem
from conversorxml.models.document import DocumentVariant


def stem_of(path: str) -> FileStem:
    """Base name without its last extension."""
    return PurePath(path).stem


def classify(stem: FileStem) -> DocumentVariant:
    """Match the text before the first underscore against known prefixes.

    Matching is case-sensitive and never looks at file content. A stem with no
    underscore is matched as a whole.

    Raises:
        UnsupportedSchemaError: prefix is not ``comissao`` or ``vales``.
    """
    prefix = stem.split("_", 1)[0]
    try:
        return DocumentVariant(prefix)
    except ValueError:
        raise UnsupportedSchemaError(stem, prefix) from None
