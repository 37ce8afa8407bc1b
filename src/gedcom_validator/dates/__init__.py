from __future__ import annotations

from .comparator import DATE_FORMAT, DateOrder, compare_dates, is_after, is_before, parse_date
from .normalizer import gedcom_to_us_date

__all__ = [
    "DATE_FORMAT",
    "DateOrder",
    "compare_dates",
    "gedcom_to_us_date",
    "is_after",
    "is_before",
    "parse_date",
]
