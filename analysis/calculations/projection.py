"""
Projection calculation utilities.
Pure functions for monthly-compounded growth with recurring contributions.
"""

from typing import List

MONTHS_PER_YEAR = 12


class ProjectionError(Exception):
    """Raised when projection calculation fails."""
    pass


def monthly_rate(annual_rate_percent: float) -> float:
    """Convert an annual percentage rate to a monthly decimal rate."""
    return annual_rate_percent / 100 / MONTHS_PER_YEAR


def year_end_balances(
    initial: float,
    monthly_contribution: float,
    years: int,
    annual_rate_percent: float
) -> List[float]:
    """
    Balance at every year boundary under monthly compounding.

    Each month: balance = balance × (1 + monthly_rate) + contribution

    Args:
        initial: Starting balance
        monthly_contribution: Amount added at the end of every month
        years: Number of years to project
        annual_rate_percent: Assumed annual return in percent (may be negative)

    Returns:
        List of years + 1 balances; index 0 is the initial balance and
        index y is the balance after year y

    Example:
        year_end_balances(1000, 0, 1, 0) -> [1000.0, 1000.0]
    """
    if years <= 0:
        raise ProjectionError("years must be positive")

    rate = monthly_rate(annual_rate_percent)
    balance = float(initial)
    balances = [balance]

    for _ in range(years):
        for _ in range(MONTHS_PER_YEAR):
            balance = balance * (1 + rate) + monthly_contribution
        balances.append(balance)

    return balances


def total_invested(initial: float, monthly_contribution: float, years: int) -> float:
    """Capital put in after the given number of whole years."""
    return initial + monthly_contribution * MONTHS_PER_YEAR * years
