"""
Returns calculation utilities.
Pure functions for daily simple returns and lump-sum investment outcome.
"""

import numpy as np
from typing import List, Tuple


class ReturnsError(Exception):
    """Raised when returns calculation fails."""
    pass


def daily_returns(prices: List[float]) -> np.ndarray:
    """
    Calculate simple returns between consecutive observations.

    Formula: r_i = (P_i / P_{i-1}) - 1

    Args:
        prices: List of prices in chronological order

    Returns:
        Numpy array of returns (length = len(prices) - 1)

    Raises:
        ReturnsError: If insufficient data or invalid prices

    Example:
        prices = [100, 110, 99]
        Returns: [0.10, -0.10]
    """
    if len(prices) < 2:
        raise ReturnsError("Insufficient data: need at least 2 prices")

    if any(p <= 0 for p in prices):
        raise ReturnsError("Zero or negative prices not allowed")

    prices_array = np.asarray(prices, dtype=np.float64)

    return prices_array[1:] / prices_array[:-1] - 1


def buy_and_hold(
    investment: float,
    start_price: float,
    end_price: float
) -> Tuple[float, float]:
    """
    Value of a lump sum bought at start_price and held to end_price.

    Args:
        investment: Amount invested
        start_price: Price paid per share
        end_price: Price at the end of the holding period

    Returns:
        Tuple of (shares, final_value)

    Raises:
        ReturnsError: If prices are not positive
    """
    if start_price <= 0 or end_price <= 0:
        raise ReturnsError("Zero or negative prices not allowed")

    shares = investment / start_price
    return shares, shares * end_price


def net_return_pct(investment: float, final_value: float) -> float:
    """
    Net return in percent: (final - investment) / investment * 100.

    Raises:
        ReturnsError: If investment is not positive
    """
    if investment <= 0:
        raise ReturnsError("Investment must be positive")

    return (final_value - investment) / investment * 100
