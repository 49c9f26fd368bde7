"""
Guardrails for the simulation engines - error taxonomy and input checks.
Every check raises a typed error carrying enough detail to show the user
which field was wrong and why. No partial results are ever returned.
"""

import math
from datetime import date, datetime
from typing import Any, Optional


class SimulationError(ValueError):
    """Base class for errors that abort a simulation call."""
    pass


class InvalidInputError(SimulationError):
    """Raised when a user input is non-numeric or out of its domain."""

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")


class InvalidRangeError(SimulationError):
    """Raised when the requested start date is not before the end date."""
    pass


class NoDataInRangeError(SimulationError):
    """Raised when the requested window lies outside the available data."""
    pass


class InsufficientDataError(SimulationError):
    """Raised when the resolved window has too few points for risk metrics."""
    pass


def is_real_number(value: Any) -> bool:
    """True for int/float values that are not bool and not NaN/inf."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def require_number(value: Any, field: str) -> float:
    """
    Validate that a value is a finite real number.

    Raises:
        InvalidInputError: If value is non-numeric, NaN or infinite
    """
    if not is_real_number(value):
        raise InvalidInputError(field, f"must be a finite number, got {value!r}")
    return float(value)


def require_positive(value: Any, field: str) -> float:
    """
    Validate that a value is a finite number > 0.

    Raises:
        InvalidInputError: If validation fails
    """
    number = require_number(value, field)
    if number <= 0:
        raise InvalidInputError(field, f"must be a positive number, got {value!r}")
    return number


def require_non_negative(value: Any, field: str) -> float:
    """
    Validate that a value is a finite number >= 0.

    Raises:
        InvalidInputError: If validation fails
    """
    number = require_number(value, field)
    if number < 0:
        raise InvalidInputError(field, f"must not be negative, got {value!r}")
    return number


def require_whole_positive(value: Any, field: str) -> int:
    """
    Validate that a value is a whole number > 0.

    Floats with no fractional part (e.g. 10.0) are accepted.

    Raises:
        InvalidInputError: If validation fails
    """
    number = require_number(value, field)
    if not float(number).is_integer():
        raise InvalidInputError(field, f"must be a whole number, got {value!r}")
    if number <= 0:
        raise InvalidInputError(field, f"must be greater than zero, got {value!r}")
    return int(number)


def require_date(value: Any, field: str) -> date:
    """
    Validate a calendar date input.

    datetime values are reduced to their date part.

    Raises:
        InvalidInputError: If value is not a date
    """
    if isinstance(value, datetime):
        return value.date()
    if not isinstance(value, date):
        raise InvalidInputError(field, f"must be a date, got {type(value).__name__}")
    return value


def validate_date_range(start: date, end: date) -> None:
    """
    Validate that start is strictly before end.

    Raises:
        InvalidRangeError: If start >= end
    """
    if start >= end:
        raise InvalidRangeError(
            f"start date ({start.isoformat()}) must be before end date ({end.isoformat()})"
        )


def validate_window_size(
    points: int,
    minimum: int,
    start: Optional[date] = None,
    end: Optional[date] = None
) -> None:
    """
    Validate that a resolved window holds enough observations.

    Raises:
        InsufficientDataError: If points < minimum
    """
    if points < minimum:
        window = ""
        if start is not None and end is not None:
            window = f" between {start.isoformat()} and {end.isoformat()}"
        raise InsufficientDataError(
            f"Not enough data to compute risk metrics: {points} price points{window}, "
            f"need at least {minimum}"
        )
