"""Semicolon-delimited CSV output with a fixed header per variant."""

from __future__ import annotations

import csv
import io
from typing import Iterable, TextIO

from conversorxml.core.exceptions import WriteFailureError
from conversorxml.core.types import OutputRow
from conversorxml.models.document import DocumentVariant

DELIMITER = ";"
LINE_TERMINATOR = "\n"
ENCODING = "utf-8"


class _RowWriter:
    """csv.writer that quotes fields holding either CR or LF.

    QUOTE_MINIMAL only quotes line-break characters found in the writer's
    terminator, so rows are formatted with "\\r\\n" and re-terminated with
    LINE_TERMINATOR.
    """

    _FORMAT_TERMINATOR = "\r\n"

    def __init__(self, destination: TextIO) -> None:
        self._destination = destination
        self._line = io.StringIO(newline="")
        self._writer = csv.writer(
            self._line,
            delimiter=DELIMITER,
            quoting=csv.QUOTE_MINIMAL,
            lineterminator=self._FORMAT_TERMINATOR,
        )

    def writerow(self, row: Iterable[str]) -> None:
        self._line.seek(0)
        self._line.truncate()
        self._writer.writerow(row)
        text = self._line.getvalue()[: -len(self._FORMAT_TERMINATOR)]
        self._destination.write(text + LINE_TERMINATOR)


def emit(rows: Iterable[OutputRow], variant: DocumentVariant, destination: TextIO) -> int:
    """Write the header and ``rows`` to ``destination``; return the data row count.

    Fields containing the delimiter, a quote or a line break are double-quoted
    with inner quotes doubled. File destinations must be opened with
    ``newline=""``.

    Raises:
        WriteFailureError: the stream rejected a write.
    """
    writer = _RowWriter(destination)
    count = 0
    try:
        writer.writerow(variant.columns)
        for row in rows:
            writer.writerow(row)
            count += 1
    except OSError as exc:
        raise WriteFailureError(f"CSV write failed after {count} row(s): {exc}") from exc
    return count


def render(rows: Iterable[OutputRow], variant: DocumentVariant) -> bytes:
    """Serialize the whole CSV document in memory."""
    buffer = io.StringIO(newline="")
    emit(rows, variant, buffer)
    return buffer.getvalue().encode(ENCODING)
