"""
Result value objects for the simulation engines.
Created fresh per call and never mutated.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class ChartPoint:
    """Display point for the historical value chart."""
    label: str
    date: date
    price: float


@dataclass(frozen=True)
class HistoricalSimulationResult:
    """
    Outcome of a lump-sum back-test over a resolved date window.

    start_date and end_date are the observed trading dates actually used,
    which may differ from the dates that were requested.
    """
    initial_investment: float
    shares: float
    final_value: float
    net_return_pct: float
    max_drawdown: float
    annualized_volatility: float
    start_date: date
    end_date: date
    trading_days: int
    drawdown_peak_date: Optional[date] = None
    drawdown_trough_date: Optional[date] = None
    chart_data: Tuple[ChartPoint, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize for JSON output (dates as ISO strings)."""
        return {
            'initial_investment': self.initial_investment,
            'shares': self.shares,
            'final_value': self.final_value,
            'net_return_pct': self.net_return_pct,
            'max_drawdown': self.max_drawdown,
            'annualized_volatility': self.annualized_volatility,
            'start_date': self.start_date.isoformat(),
            'end_date': self.end_date.isoformat(),
            'trading_days': self.trading_days,
            'drawdown_peak_date': _iso_or_none(self.drawdown_peak_date),
            'drawdown_trough_date': _iso_or_none(self.drawdown_trough_date),
            'chart_data': [
                {'label': p.label, 'date': p.date.isoformat(), 'price': p.price}
                for p in self.chart_data
            ],
        }


@dataclass(frozen=True)
class FutureYearRow:
    """One year of the projection breakdown."""
    year: int
    starting_balance: float
    contributions_this_year: float
    gains_this_year: float
    ending_balance: float


@dataclass(frozen=True)
class FutureChartPoint:
    """Cumulative invested capital vs. gains at a year boundary."""
    year: int
    total_invested: float
    gains: float


@dataclass(frozen=True)
class FutureSimulationResult:
    """Outcome of a monthly-compounded contribution projection."""
    initial: float
    monthly_contribution: float
    years: int
    annual_rate_percent: float
    final_value: float
    total_contributed: float
    total_gains: float
    breakdown: Tuple[FutureYearRow, ...] = field(default_factory=tuple)
    chart_data: Tuple[FutureChartPoint, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize for JSON output."""
        return {
            'initial': self.initial,
            'monthly_contribution': self.monthly_contribution,
            'years': self.years,
            'annual_rate_percent': self.annual_rate_percent,
            'final_value': self.final_value,
            'total_contributed': self.total_contributed,
            'total_gains': self.total_gains,
            'breakdown': [
                {
                    'year': row.year,
                    'starting_balance': row.starting_balance,
                    'contributions_this_year': row.contributions_this_year,
                    'gains_this_year': row.gains_this_year,
                    'ending_balance': row.ending_balance,
                }
                for row in self.breakdown
            ],
            'chart_data': [
                {'year': p.year, 'total_invested': p.total_invested, 'gains': p.gains}
                for p in self.chart_data
            ],
        }


def _iso_or_none(value: Optional[date]) -> Optional[str]:
    return value.isoformat() if value is not None else None
