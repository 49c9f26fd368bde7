"""
Future simulation engine - projects a contribution plan at a fixed rate.
One balance computation feeds both the yearly breakdown and the
cumulative chart series so the two always agree at year boundaries.
"""

import logging

from analysis.calculations.projection import (
    MONTHS_PER_YEAR,
    total_invested,
    year_end_balances,
)
from analysis.guardrails import (
    require_non_negative,
    require_number,
    require_whole_positive,
)
from analysis.models import FutureChartPoint, FutureSimulationResult, FutureYearRow

logger = logging.getLogger(__name__)


def simulate_future(
    initial: float,
    monthly_contribution: float,
    years: int,
    annual_rate_percent: float
) -> FutureSimulationResult:
    """
    Project growth of an initial amount plus monthly contributions.

    Compounding is monthly (12 periods per year); each contribution is
    added after that month's growth.

    Args:
        initial: Starting balance (>= 0)
        monthly_contribution: Amount added every month (>= 0)
        years: Projection length in whole years (> 0)
        annual_rate_percent: Assumed annual return in percent (may be negative)

    Returns:
        FutureSimulationResult with per-year breakdown and chart series

    Raises:
        InvalidInputError: If any input is non-numeric or out of range
    """
    initial = require_non_negative(initial, 'initial')
    monthly = require_non_negative(monthly_contribution, 'monthly_contribution')
    years = require_whole_positive(years, 'years')
    rate = require_number(annual_rate_percent, 'annual_rate_percent')

    balances = year_end_balances(initial, monthly, years, rate)
    yearly_contribution = monthly * MONTHS_PER_YEAR

    breakdown = []
    chart_data = [FutureChartPoint(year=0, total_invested=initial, gains=0.0)]

    for year in range(1, years + 1):
        starting, ending = balances[year - 1], balances[year]
        breakdown.append(FutureYearRow(
            year=year,
            starting_balance=starting,
            contributions_this_year=yearly_contribution,
            gains_this_year=ending - starting - yearly_contribution,
            ending_balance=ending,
        ))

        invested = total_invested(initial, monthly, year)
        chart_data.append(FutureChartPoint(
            year=year,
            total_invested=invested,
            gains=ending - invested,
        ))

    final_value = balances[-1]
    total_contributed = total_invested(initial, monthly, years)

    logger.info(
        f"Future simulation {years}y at {rate}%: final {final_value:.2f}, "
        f"contributed {total_contributed:.2f}"
    )

    return FutureSimulationResult(
        initial=initial,
        monthly_contribution=monthly,
        years=years,
        annual_rate_percent=rate,
        final_value=final_value,
        total_contributed=total_contributed,
        total_gains=final_value - total_contributed,
        breakdown=tuple(breakdown),
        chart_data=tuple(chart_data),
    )
