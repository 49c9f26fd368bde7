"""
Drawdown calculation utilities.
Pure functions for running-peak drawdown analysis.
"""

import numpy as np
from datetime import date
from typing import Dict, List, Union


class DrawdownError(Exception):
    """Raised when drawdown calculation fails."""
    pass


def drawdown_series(prices: List[float]) -> np.ndarray:
    """
    Drawdown at every observation relative to the running peak.

    Formula: dd_t = (P_t - max(P_0..P_t)) / max(P_0..P_t)

    Args:
        prices: List of prices in chronological order

    Returns:
        Numpy array of drawdowns, each <= 0

    Raises:
        DrawdownError: If no data or invalid prices
    """
    if len(prices) == 0:
        raise DrawdownError("Insufficient data: need at least 1 price")

    if any(p <= 0 for p in prices):
        raise DrawdownError("Zero or negative prices not allowed")

    prices_array = np.asarray(prices, dtype=np.float64)

    # Running peak; the first observation is its own peak
    running_max = np.maximum.accumulate(prices_array)

    return (prices_array - running_max) / running_max


def drawdown_stats(
    prices: List[float],
    dates: List[date]
) -> Dict[str, Union[float, date, None]]:
    """
    Maximum drawdown with the dates of its peak and trough.

    Args:
        prices: List of prices in chronological order
        dates: Corresponding trading dates

    Returns:
        Dictionary with drawdown statistics:
        - max_drawdown_pct: Largest decline as decimal (<= 0)
        - peak_date: Date of the peak preceding the largest decline
        - trough_date: Date of the lowest point of that decline
        Both dates are None when there is no decline.

    Raises:
        DrawdownError: If insufficient data or invalid inputs
    """
    if len(prices) != len(dates):
        raise DrawdownError("Prices and dates must have same length")

    drawdowns = drawdown_series(prices)

    trough_idx = int(np.argmin(drawdowns))
    max_dd = float(drawdowns[trough_idx])

    if max_dd == 0:
        return {'max_drawdown_pct': 0.0, 'peak_date': None, 'trough_date': None}

    # Peak is the first occurrence of the running maximum before the trough
    peak_idx = int(np.argmax(np.asarray(prices[:trough_idx + 1], dtype=np.float64)))

    return {
        'max_drawdown_pct': max_dd,
        'peak_date': dates[peak_idx],
        'trough_date': dates[trough_idx],
    }
