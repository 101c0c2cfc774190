"""Turns a company tree into CSV rows and running totals."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Optional

from conversorxml.conversion.destring import ZERO, coerce, is_numeric
from conversorxml.core.types import OutputRow
from conversorxml.models.document import Company, DocumentVariant, Employee
from conversorxml.models.outputs import ConversionSummary

logger = logging.getLogger(__name__)


def _amount(text: Optional[str], field: str, employee: Employee) -> Decimal:
    if text and text.strip() and not is_numeric(text):
        logger.warning(
            "Non-numeric %s %r for CPF %s counted as zero", field, text, employee.tax_id
        )
    return coerce(text)


def flatten(company: Company, variant: DocumentVariant) -> tuple[list[OutputRow], ConversionSummary]:
    """Build one row per employee, in document order, and sum the amounts.

    Company fields are repeated on every row. Amount columns hold the source
    text unchanged; totals use the coerced values. A company without
    employees yields no rows and ``row_count == 0``.
    """
    rows: list[OutputRow] = []
    total_primary = ZERO
    total_secondary = ZERO

    for employee in company.employees or ():
        total_primary += _amount(employee.amount, "Valor", employee)

        if variant is DocumentVariant.COMMISSION:
            bonus_target = employee.bonus_target or ""
            total_secondary += _amount(bonus_target, "MetaPremio", employee)
            row = company.row_prefix + (employee.tax_id, employee.amount, bonus_target)
        else:
            row = company.row_prefix + (employee.tax_id, employee.amount)

        rows.append(row)

    summary = ConversionSummary(
        variant=variant,
        row_count=len(rows),
        total_primary_amount=total_primary,
        total_secondary_amount=total_secondary,
    )
    return rows, summary
