"""Runs classify, parse, flatten and export for one input file."""

from __future__ import annotations

import logging
from pathlib import PurePath

from conversorxml.conversion.csv_export import render
from conversorxml.conversion.file_parser import parse
from conversorxml.conversion.flattener import flatten
from conversorxml.conversion.schema_matcher import classify, stem_of
from conversorxml.core.exceptions import ConverterError
from conversorxml.core.protocols import IFileStore
from conversorxml.models.outputs import ConversionOutcome, Converted, Failed, NoData
from conversorxml.persistence import create_file_store

logger = logging.getLogger(__name__)

OUTPUT_SUFFIX = ".csv"


def output_path_for(input_path: str) -> str:
    """Sibling path sharing the input's base name, with a ``.csv`` suffix."""
    return str(PurePath(input_path).with_suffix(OUTPUT_SUFFIX))


class ConversionPipeline:
    """One-shot XML to CSV conversion over an injected file store.

    Every step is deterministic, so a failure is reported once and never retried.
    """

    def __init__(self, *, file_store: IFileStore) -> None:
        self._files = file_store

    def convert(self, input_path: str) -> ConversionOutcome:
        """Convert ``input_path`` and describe what happened.

        Returns ``Converted`` with the summary, ``NoData`` when the company has
        no employees (nothing written), or ``Failed`` for any ConverterError.
        """
        try:
            return self._run(input_path)
        except ConverterError as exc:
            logger.info("Conversion of %s failed: %s", input_path, exc)
            return Failed(input_path=input_path, error_kind=type(exc).__name__, reason=str(exc))

    def _run(self, input_path: str) -> Converted | NoData:
        variant = classify(stem_of(input_path))
        logger.debug("Classified %s as %s", input_path, variant.value)

        document = parse(self._files.read(input_path), variant)
        company = document.company
        if not company.has_employees:
            logger.info("No employees in %s; nothing exported", input_path)
            return NoData(input_path=input_path, variant=variant)

        rows, summary = flatten(company, variant)
        output_path = self._files.write(output_path_for(input_path), render(rows, variant))
        logger.info("Exported %d row(s) from %s to %s", summary.row_count, input_path, output_path)
        return Converted(input_path=input_path, output_path=output_path, summary=summary)


def convert(input_path: str, file_store: IFileStore | None = None) -> ConversionOutcome:
    """Convert one file using the configured local file store by default."""
    if file_store is None:
        file_store = create_file_store()
    return ConversionPipeline(file_store=file_store).convert(input_path)
