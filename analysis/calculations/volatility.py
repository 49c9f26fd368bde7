"""
Volatility calculation utilities.
Pure functions for sample standard deviation of daily returns and annualization.
"""

import math
import numpy as np
from typing import Sequence

TRADING_DAYS_PER_YEAR = 252


class VolatilityError(Exception):
    """Raised when volatility calculation fails."""
    pass


def sample_std(returns: Sequence[float]) -> float:
    """
    Sample standard deviation with Bessel's correction.

    Formula: sqrt(sum((r - mean)^2) / (len(returns) - 1))

    With exactly 2 returns the divisor is 1. That is valid arithmetic
    but a weak estimate of spread; callers get no warning about it.

    Args:
        returns: Daily returns

    Returns:
        Daily standard deviation (>= 0)

    Raises:
        VolatilityError: If fewer than 2 returns or non-finite values
    """
    returns_array = np.asarray(returns, dtype=np.float64)

    if len(returns_array) < 2:
        raise VolatilityError(
            f"Insufficient data: need at least 2 returns, have {len(returns_array)}"
        )

    if np.any(np.isnan(returns_array)):
        raise VolatilityError("NaN values not allowed in returns")

    if np.any(np.isinf(returns_array)):
        raise VolatilityError("Infinite values not allowed in returns")

    return float(np.std(returns_array, ddof=1))


def annualized_volatility(
    returns: Sequence[float],
    annualize: int = TRADING_DAYS_PER_YEAR
) -> float:
    """
    Annualized volatility from daily returns.

    Formula: σ = std(returns, ddof=1) × √annualize

    Args:
        returns: Daily simple returns
        annualize: Annualization factor (252 for daily to annual)

    Returns:
        Annualized volatility as decimal (0.25 = 25%)

    Raises:
        VolatilityError: If insufficient data or invalid values
    """
    return sample_std(returns) * math.sqrt(annualize)
