"""
Date comparison for temporal rules.

Dates travel through the record store as ``MM/DD/YYYY`` text. Comparisons
never raise: a date that is absent or does not parse makes the comparison
``INDETERMINATE`` and the calling rule skips that check.
"""

from __future__ import annotations

from datetime import date, datetime
from enum import Enum
from typing import Optional

from gedcom_validator.logging import get_logger

log = get_logger(__name__)

DATE_FORMAT = "%m/%d/%Y"


class DateOrder(Enum):
    BEFORE = "before"
    AFTER = "after"
    EQUAL = "equal"
    INDETERMINATE = "indeterminate"


def parse_date(text: Optional[str]) -> Optional[date]:
    """Parse an ``MM/DD/YYYY`` string, returning None when absent or invalid."""
    if not text or not text.strip():
        return None
    try:
        return datetime.strptime(text.strip(), DATE_FORMAT).date()
    except ValueError:
        log.debug(f"Unparsable date ignored: {text!r}")
        return None


def compare_dates(first: Optional[str], second: Optional[str]) -> DateOrder:
    """Order ``first`` relative to ``second``."""
    a = parse_date(first)
    b = parse_date(second)
    if a is None or b is None:
        return DateOrder.INDETERMINATE
    if a < b:
        return DateOrder.BEFORE
    if a > b:
        return DateOrder.AFTER
    return DateOrder.EQUAL


def is_after(first: Optional[str], second: Optional[str]) -> bool:
    return compare_dates(first, second) is DateOrder.AFTER


def is_before(first: Optional[str], second: Optional[str]) -> bool:
    return compare_dates(first, second) is DateOrder.BEFORE
