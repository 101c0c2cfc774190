"""Conversion results: per-file summary and the outcome union."""

from __future__ import annotations

from decimal import Decimal
from enum import StrEnum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from conversorxml.models.document import DocumentVariant


class ConversionSummary(BaseModel):
    """Aggregates for one converted company."""

    variant: DocumentVariant
    row_count: int = Field(default=0, ge=0)
    total_primary_amount: Decimal = Decimal("0")  # sum of Valor
    total_secondary_amount: Decimal = Decimal("0")  # sum of MetaPremio, commission only


class OutcomeStatus(StrEnum):
    CONVERTED = "CONVERTED"
    NO_DATA = "NO_DATA"
    FAILED = "FAILED"


class Converted(BaseModel):
    """CSV written successfully."""

    status: Literal[OutcomeStatus.CONVERTED] = OutcomeStatus.CONVERTED
    input_path: str
    output_path: str
    summary: ConversionSummary


class NoData(BaseModel):
    """Valid document without employees; nothing was written."""

    status: Literal[OutcomeStatus.NO_DATA] = OutcomeStatus.NO_DATA
    input_path: str
    variant: DocumentVariant


class Failed(BaseModel):
    """Conversion aborted by a ConverterError."""

    status: Literal[OutcomeStatus.FAILED] = OutcomeStatus.FAILED
    input_path: str
    error_kind: str  # exception class name, e.g. "MalformedDocumentError"
    reason: str


ConversionOutcome = Annotated[
    Union[Converted, NoData, Failed], Field(discriminator="status")
]
