"""Date utilities for spendbook.

Lenient parsing of user-typed dates into CalendarDate values.
"""

import re

import pandas as pd

from spendbook.domain.calendar import MAX_YEAR, MIN_YEAR, CalendarDate

_YEAR_FIRST = re.compile(r"^\s*\d{4}\D")


def parse_date_text(raw: str) -> CalendarDate:
    """Parse a user-entered date.

    Uses pandas.to_datetime so ISO, European and other common formats all
    work. Text starting with a four-digit year is read year-first
    (2024-03-10 is 10 March); anything else is read day-first
    (10/03/2024 is also 10 March).

    Args:
        raw: Date text as typed by the user.

    Returns:
        Valid CalendarDate.

    Raises:
        ValueError: If the text cannot be parsed or is outside the supported range.
    """
    text = raw.strip()
    if not text:
        raise ValueError("Date is empty")

    year_first = bool(_YEAR_FIRST.match(text))
    try:
        parsed = pd.to_datetime(text, dayfirst=not year_first, yearfirst=year_first)
    except (ValueError, OverflowError, pd.errors.ParserError) as e:
        raise ValueError(f"Could not parse date '{raw}': {e}") from e

    if pd.isna(parsed):
        raise ValueError(f"Could not parse date '{raw}'")

    result = CalendarDate(parsed.year, parsed.month, parsed.day)
    if not result.is_valid():
        raise ValueError(f"Date {result} is outside {MIN_YEAR}-{MAX_YEAR}")
    return result
