"""
Display formatters for simulation results.
Deterministic es-ES string formatting for currency, percentages, and dates.
"""

from datetime import datetime, date
from typing import Optional, Union


NOT_AVAILABLE = "No disponible"

# Short month names used by the es-ES locale ("21 oct 25")
SPANISH_MONTHS_SHORT = [
    'ene', 'feb', 'mar', 'abr', 'may', 'jun',
    'jul', 'ago', 'sept', 'oct', 'nov', 'dic',
]


class FormatterError(Exception):
    """Raised when formatter input validation fails."""
    pass


def _group_es(value: float, decimal_places: int) -> str:
    """Format with '.' thousands grouping and ',' decimals."""
    text = f"{value:,.{decimal_places}f}"
    return text.replace(',', '\x00').replace('.', ',').replace('\x00', '.')


def format_number(value: Optional[float], decimal_places: int = 2) -> str:
    """
    Format a number with es-ES grouping.

    Args:
        value: Number to format
        decimal_places: Number of decimal places (default: 2)

    Returns:
        Formatted string (e.g., "1.234,56")
    """
    if value is None:
        return NOT_AVAILABLE

    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise FormatterError(f"Number value must be numeric, got {type(value)}")

    return _group_es(value, decimal_places)


def format_currency_eur(value: Optional[float]) -> str:
    """
    Format an amount in euros the es-ES way.

    Args:
        value: Amount in euros

    Returns:
        Formatted currency string (e.g., "10.000,00 €", "-12,50 €")
    """
    if value is None:
        return NOT_AVAILABLE

    return f"{format_number(value, 2)} €"


def format_percentage(value: Optional[float], decimal_places: int = 2) -> str:
    """
    Format a value that is already in percent.

    Args:
        value: Percentage (-1.0 = -1%)
        decimal_places: Number of decimal places (default: 2)

    Returns:
        Formatted percentage string (e.g., "-1,00%")
    """
    if value is None:
        return NOT_AVAILABLE

    return f"{format_number(value, decimal_places)}%"


def format_fraction_as_percentage(value: Optional[float], decimal_places: int = 2) -> str:
    """
    Format a decimal fraction as a percentage (0.0845 -> "8,45%").
    """
    if value is None:
        return NOT_AVAILABLE

    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise FormatterError(f"Percentage value must be numeric, got {type(value)}")

    return format_percentage(value * 100, decimal_places)


def format_date_es(date_input: Union[str, date, datetime]) -> str:
    """
    Format a date as dd/mm/yyyy.

    Args:
        date_input: Date as ISO string, date, or datetime

    Returns:
        Formatted date (e.g., "21/10/2025")
    """
    return _coerce_date(date_input).strftime('%d/%m/%Y')


def format_chart_label(date_input: Union[str, date, datetime]) -> str:
    """
    Short chart axis label: two-digit day, short month, two-digit year.

    Args:
        date_input: Date as ISO string, date, or datetime

    Returns:
        Label (e.g., "21 oct 25")
    """
    d = _coerce_date(date_input)
    return f"{d.day:02d} {SPANISH_MONTHS_SHORT[d.month - 1]} {d.year % 100:02d}"


def _coerce_date(date_input: Union[str, date, datetime]) -> date:
    if isinstance(date_input, datetime):
        return date_input.date()
    if isinstance(date_input, date):
        return date_input
    if isinstance(date_input, str):
        try:
            return date.fromisoformat(date_input[:10])
        except ValueError as e:
            raise FormatterError(f"Invalid date string: {date_input}") from e
    raise FormatterError(f"Date must be str, date, or datetime, got {type(date_input)}")
