"""
Historical simulation engine - lump-sum back-test over a real price series.
Resolves the requested window to observed trading dates, then composes
returns, volatility and drawdown calculations into one result.
"""

import logging
from bisect import bisect_left, bisect_right
from datetime import date
from typing import List, Tuple

from analysis.calculations.drawdown import drawdown_stats
from analysis.calculations.returns import buy_and_hold, daily_returns, net_return_pct
from analysis.calculations.volatility import TRADING_DAYS_PER_YEAR, annualized_volatility
from analysis.guardrails import (
    InvalidInputError,
    NoDataInRangeError,
    require_date,
    require_positive,
    validate_date_range,
    validate_window_size,
)
from analysis.models import ChartPoint, HistoricalSimulationResult
from ingestion.models import PricePoint
from ingestion.transforms.validators import ValidationError, check_series_order
from reports.formatters import format_chart_label

logger = logging.getLogger(__name__)

# Two daily returns are the minimum for a sample standard deviation
MIN_WINDOW_POINTS = 3


def resolve_window(
    series: List[PricePoint],
    requested_start: date,
    requested_end: date
) -> Tuple[int, int]:
    """
    Map a requested date range onto observed trading days.

    The effective start is the first point on or after requested_start;
    the effective end is the last point on or before requested_end.
    Prices are never interpolated.

    Args:
        series: Price points sorted ascending by date
        requested_start: First calendar day of interest
        requested_end: Last calendar day of interest

    Returns:
        Tuple of (start_index, end_index) into series, inclusive. When the
        range falls inside a gap between observations start_index is
        greater than end_index.

    Raises:
        NoDataInRangeError: If no point lies on/after the start or on/before the end
    """
    dates = [p.date for p in series]

    start_idx = bisect_left(dates, requested_start)
    end_idx = bisect_right(dates, requested_end) - 1

    if start_idx >= len(dates) or end_idx < 0:
        if dates:
            available = f"available data covers {dates[0].isoformat()} to {dates[-1].isoformat()}"
        else:
            available = "no price data available"
        raise NoDataInRangeError(
            f"No data found for {requested_start.isoformat()} to "
            f"{requested_end.isoformat()} ({available})"
        )

    return start_idx, end_idx


def simulate_historical(
    series: List[PricePoint],
    initial_investment: float,
    start_date: date,
    end_date: date
) -> HistoricalSimulationResult:
    """
    Back-test a lump-sum investment over a date range.

    Args:
        series: Price points sorted ascending by date (not modified)
        initial_investment: Amount invested on the effective start date
        start_date: Requested start of the holding period
        end_date: Requested end of the holding period

    Returns:
        HistoricalSimulationResult with the effective dates actually used

    Raises:
        InvalidInputError: If the investment or dates are invalid, or the
            series is not sorted ascending by date
        InvalidRangeError: If start_date >= end_date
        NoDataInRangeError: If the range lies outside the data
        InsufficientDataError: If fewer than 3 points fall in the window
    """
    investment = require_positive(initial_investment, 'initial_investment')
    start = require_date(start_date, 'start_date')
    end = require_date(end_date, 'end_date')
    validate_date_range(start, end)

    try:
        check_series_order(series)
    except ValidationError as e:
        raise InvalidInputError('series', str(e)) from e

    start_idx, end_idx = resolve_window(series, start, end)
    window = series[start_idx:end_idx + 1]

    validate_window_size(len(window), MIN_WINDOW_POINTS, start, end)

    prices = [p.price for p in window]
    dates = [p.date for p in window]

    returns = daily_returns(prices)
    volatility = annualized_volatility(returns, annualize=TRADING_DAYS_PER_YEAR)
    dd = drawdown_stats(prices, dates)

    start_point, end_point = window[0], window[-1]
    shares, final_value = buy_and_hold(investment, start_point.price, end_point.price)

    result = HistoricalSimulationResult(
        initial_investment=investment,
        shares=shares,
        final_value=final_value,
        net_return_pct=net_return_pct(investment, final_value),
        max_drawdown=dd['max_drawdown_pct'],
        annualized_volatility=volatility,
        start_date=start_point.date,
        end_date=end_point.date,
        trading_days=len(window),
        drawdown_peak_date=dd['peak_date'],
        drawdown_trough_date=dd['trough_date'],
        chart_data=tuple(
            ChartPoint(label=format_chart_label(p.date), date=p.date, price=p.price)
            for p in window
        ),
    )

    logger.info(
        f"Historical simulation {result.start_date} to {result.end_date}: "
        f"{result.trading_days} points, net return {result.net_return_pct:.2f}%"
    )

    return result
