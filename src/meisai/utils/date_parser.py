"""Date parsing utilities."""

import re
from datetime import date, datetime, timedelta
from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

MONTH_KEY_PATTERN = re.compile(r"^(\d{4})-(\d{2})$")

INCOMPLETE_DEFAULTS = (datetime(2000, 1, 1), datetime(2001, 2, 2))


def parse_date(date_str: str) -> date:
    """Parse a statement date string into a date object.

    Statements write dates year first, e.g. "2025/06/15" or "2025/6/1";
    ISO dates ("2025-06-15") are accepted as well.

    Args:
        date_str: Date string

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    if not date_str or not date_str.strip():
        raise ValueError("Empty date string")

    date_str = date_str.strip()
    try:
        # dateutil fills missing parts from the default, so parse against two
        # defaults that differ in every field and require the same result
        first = date_parser.parse(
            date_str, yearfirst=True, dayfirst=False, default=INCOMPLETE_DEFAULTS[0]
        )
        second = date_parser.parse(
            date_str, yearfirst=True, dayfirst=False, default=INCOMPLETE_DEFAULTS[1]
        )
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")

    if first.date() != second.date():
        raise ValueError(f"Incomplete date '{date_str}': year, month and day are required")
    return first.date()


def month_key(value: date) -> str:
    """Return the YYYY-MM key of a date's calendar month."""
    return value.strftime("%Y-%m")


def month_range(month: str) -> tuple[date, date]:
    """Get first and last day for a YYYY-MM month key.

    Args:
        month: Month key such as "2025-06"

    Returns:
        Tuple of (start_date, end_date), both inclusive

    Raises:
        ValueError: If month key is malformed
    """
    match = MONTH_KEY_PATTERN.match(month.strip())
    if match is None:
        raise ValueError(f"Invalid month '{month}'. Expected format: YYYY-MM")

    year, month_number = int(match.group(1)), int(match.group(2))
    if not 1 <= month_number <= 12:
        raise ValueError(f"Invalid month '{month}'. Expected format: YYYY-MM")

    start_date = date(year, month_number, 1)
    # Last day of month (day before first day of next month)
    end_date = start_date + relativedelta(months=1) - timedelta(days=1)
    return (start_date, end_date)
