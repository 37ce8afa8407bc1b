# src/gedcom_validator/dates/normalizer.py

from __future__ import annotations

import re
from typing import Optional


# ---------------------------------------------------------------------------
# Month helpers
# ---------------------------------------------------------------------------

MONTHS = {
    "JAN": 1,
    "FEB": 2,
    "MAR": 3,
    "APR": 4,
    "MAY": 5,
    "JUN": 6,
    "JUL": 7,
    "AUG": 8,
    "SEP": 9,
    "SEPT": 9,
    "OCT": 10,
    "NOV": 11,
    "DEC": 12,
}

_EXACT_DATE_RE = re.compile(r"^(\d{1,2})\s+([A-Za-z]{3,4})\.?\s+(\d{3,4})$")


def gedcom_to_us_date(value: Optional[str]) -> Optional[str]:
    """
    Convert an exact GEDCOM date (``1 JAN 1990``) to ``01/01/1990``.

    Anything that is not a single exact day (ranges, qualifiers, bare years)
    is returned stripped but otherwise untouched, so later comparisons treat
    it as indeterminate rather than guessing a day.
    """
    if value is None:
        return None
    text = value.strip()
    if not text:
        return None

    m = _EXACT_DATE_RE.match(text)
    if not m:
        return text

    day, month_token, year = m.groups()
    month = MONTHS.get(month_token.upper())
    if month is None:
        return text

    return f"{month:02d}/{int(day):02d}/{int(year):04d}"
