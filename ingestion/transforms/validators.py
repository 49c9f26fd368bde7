"""
Core validators for parsed price observations.
Pure functions - no IO, network, or side effects.
"""

import math
from datetime import date, datetime
from typing import List

from ingestion.models import PricePoint


class ValidationError(ValueError):
    """Raised when data validation fails."""
    pass


def validate_price_point(point: PricePoint) -> None:
    """
    Validate a parsed price point.

    Args:
        point: PricePoint produced by the ingestion parser

    Raises:
        ValidationError: If validation fails
    """
    if not isinstance(point, PricePoint):
        raise ValidationError(f"expected PricePoint, got {type(point)}")

    # datetime is a date subclass but carries a time-of-day
    if not isinstance(point.date, date) or isinstance(point.date, datetime):
        raise ValidationError(f"date must be date, got {type(point.date)}")

    price = point.price
    if isinstance(price, bool) or not isinstance(price, (int, float)):
        raise ValidationError(f"price must be numeric, got {type(price)}")

    if not math.isfinite(price):
        raise ValidationError(f"price must be finite, got {price}")

    if price <= 0:
        raise ValidationError(f"price must be positive, got {price}")


def check_series_order(series: List[PricePoint]) -> None:
    """
    Check that a series is sorted ascending by date.

    Repeated dates are allowed; the feed is expected to be one row per
    day but duplicates are kept rather than merged.

    Args:
        series: List of price points

    Raises:
        ValidationError: If any date is earlier than its predecessor
    """
    for i in range(1, len(series)):
        if series[i].date < series[i - 1].date:
            raise ValidationError(
                f"Series dates not ascending at index {i}: "
                f"{series[i - 1].date} > {series[i].date}"
            )
