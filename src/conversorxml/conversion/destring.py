"""Destring — converts raw amount text from payroll XML into Decimal.

Upstream files come from an external payroll system, so anything that is not
a plain decimal literal counts as zero instead of aborting the conversion.
"""

from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation
from typing import Optional

ZERO = Decimal("0")

# Plain decimal literal: optional sign, '.' fraction, optional exponent.
# Comma decimals, thousands separators and underscores are rejected.
_DECIMAL_LITERAL = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")

# Anything past this magnitude is garbage for a payroll amount and would
# overflow the default decimal context once summed.
_MAX_ADJUSTED_EXPONENT = 99


def is_numeric(text: Optional[str]) -> bool:
    """True when ``coerce`` would parse ``text`` instead of defaulting to zero."""
    if text is None:
        return False
    candidate = text.strip()
    if not _DECIMAL_LITERAL.fullmatch(candidate):
        return False
    try:
        value = Decimal(candidate)
    except InvalidOperation:
        return False
    return value.is_finite() and value.adjusted() <= _MAX_ADJUSTED_EXPONENT


def coerce(text: Optional[str]) -> Decimal:
    """Parse ``text`` as a Decimal; absent, blank or invalid input yields 0."""
    if not is_numeric(text):
        return ZERO
    return Decimal(text.strip())
