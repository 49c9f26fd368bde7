"""
Locale parsers for the fund price feed.
Pure functions - no IO, network, or side effects.

The feed uses Spanish conventions:
- Numbers: '.' thousands separator, ',' decimal separator ("1.234,56")
- Dates: dd.mm.yyyy ("21.10.2025")

Parsers never raise on bad input. They return a sentinel instead
(NaN for numbers, None for dates) and the caller decides what to do.
"""

import math
import re
from datetime import date
from typing import Any, Optional


_DATE_PATTERN = re.compile(r'^(\d{1,2})\.(\d{1,2})\.(\d{4})$')
# float() alone would also accept "1_000" and "inf"
_NUMBER_PATTERN = re.compile(r'^[+-]?(\d+(\.\d*)?|\.\d+)$')


class ParseError(ValueError):
    """Raised when a raw feed row cannot be turned into a price point."""
    pass


def parse_locale_number(text: Any) -> float:
    """
    Parse a Spanish-formatted number.

    Algorithm: drop every '.', turn the first ',' into '.', parse as float.

    Args:
        text: Raw number token (e.g. "18,235" or "1.234,56")

    Returns:
        Parsed float, or NaN if the token is not numeric

    Example:
        parse_locale_number("1.234,56") -> 1234.56
        parse_locale_number("18,235") -> 18.235
    """
    if not isinstance(text, str):
        return math.nan

    cleaned = text.strip().replace('.', '').replace(',', '.', 1)
    if not _NUMBER_PATTERN.match(cleaned):
        return math.nan

    return float(cleaned)


def parse_locale_date(text: Any) -> Optional[date]:
    """
    Parse a dd.mm.yyyy date.

    Returns a plain date (no time-of-day, no timezone), so comparisons
    do not depend on the timezone of the running process.

    Args:
        text: Raw date token (e.g. "21.10.2025")

    Returns:
        date object, or None if the token is malformed or not a real
        calendar day
    """
    if not isinstance(text, str):
        return None

    match = _DATE_PATTERN.match(text.strip())
    if match is None:
        return None

    day, month, year = (int(part) for part in match.groups())

    try:
        return date(year, month, day)
    except ValueError:
        # e.g. 31.02.2025
        return None


def is_missing_number(value: float) -> bool:
    """True if value is the NaN sentinel returned by parse_locale_number."""
    return isinstance(value, float) and math.isnan(value)
