"""
Date-range presets for the historical simulator.
Pure functions over the bounds of the available price series.
"""

from datetime import date
from typing import Dict, List, Tuple

from dateutil.relativedelta import relativedelta

from analysis.guardrails import InvalidInputError, NoDataInRangeError
from ingestion.models import PricePoint

PRESETS = ('1y', '3y', '5y', 'ytd', 'max')

_YEARS_BACK = {'1y': 1, '3y': 3, '5y': 5}


def series_bounds(series: List[PricePoint]) -> Tuple[date, date]:
    """
    First and last observed dates of an ascending series.

    Raises:
        NoDataInRangeError: If the series is empty
    """
    if not series:
        raise NoDataInRangeError("No price data available")
    return series[0].date, series[-1].date


def resolve_date_preset(preset: str, min_date: date, max_date: date) -> Tuple[date, date]:
    """
    Compute the (start, end) range for a preset.

    The end is always max_date. The start is clamped to min_date when the
    preset would reach further back than the data does.

    Args:
        preset: One of '1y', '3y', '5y', 'ytd', 'max'
        min_date: First date with data
        max_date: Last date with data

    Returns:
        Tuple of (start, end)

    Raises:
        InvalidInputError: If preset is unknown or min_date > max_date

    Example:
        resolve_date_preset('1y', date(2015, 1, 2), date(2025, 10, 21))
        -> (date(2024, 10, 21), date(2025, 10, 21))
    """
    if preset not in PRESETS:
        raise InvalidInputError('preset', f"must be one of {', '.join(PRESETS)}, got {preset!r}")

    if min_date > max_date:
        raise InvalidInputError(
            'min_date', f"{min_date.isoformat()} is after max date {max_date.isoformat()}"
        )

    if preset in _YEARS_BACK:
        # Feb 29 maps to Feb 28 in non-leap years
        start = max_date - relativedelta(years=_YEARS_BACK[preset])
    elif preset == 'ytd':
        start = date(max_date.year, 1, 1)
    else:
        start = min_date

    if start < min_date:
        start = min_date

    return start, max_date


def all_preset_ranges(min_date: date, max_date: date) -> Dict[str, Tuple[date, date]]:
    """Resolve every preset at once, keyed by preset tag."""
    return {preset: resolve_date_preset(preset, min_date, max_date) for preset in PRESETS}
