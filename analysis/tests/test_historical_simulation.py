"""
Tests for the historical simulation engine.
Crafted series with known outcomes plus the golden feed.
"""

import math
import pytest
from datetime import date, datetime, timedelta
from pathlib import Path

from analysis.historical_simulation import simulate_historical, resolve_window, MIN_WINDOW_POINTS
from analysis.guardrails import (
    InvalidInputError,
    InvalidRangeError,
    NoDataInRangeError,
    InsufficientDataError,
)
from analysis.models import HistoricalSimulationResult
from ingestion.models import PricePoint
from ingestion.transforms.normalizers import parse_price_csv


def make_series(prices, start=date(2025, 1, 6), step_days=1):
    return [
        PricePoint(start + timedelta(days=i * step_days), float(p))
        for i, p in enumerate(prices)
    ]


@pytest.fixture
def scenario_series():
    """(d1, 100), (d2, 110), (d3, 99)."""
    return make_series([100, 110, 99])


@pytest.fixture
def golden_series():
    fixture_path = Path(__file__).parent.parent.parent / 'tests/fixtures/golden/sigma_prices_sample.csv'
    return parse_price_csv(fixture_path.read_text(encoding='utf-8'))


class TestScenarios:
    """Worked examples with hand-computed outcomes."""

    def test_three_point_scenario(self, scenario_series):
        result = simulate_historical(
            scenario_series, 1000, date(2025, 1, 6), date(2025, 1, 8)
        )

        assert isinstance(result, HistoricalSimulationResult)
        assert result.shares == pytest.approx(10.0)
        assert result.final_value == pytest.approx(990.0)
        assert result.net_return_pct == pytest.approx(-1.0)
        assert result.max_drawdown == pytest.approx((99 - 110) / 110)
        assert result.max_drawdown == pytest.approx(-0.1)
        assert result.trading_days == 3

    def test_three_point_volatility(self, scenario_series):
        """Two returns (+10%, -10%): divisor is 1, not 0."""
        result = simulate_historical(
            scenario_series, 1000, date(2025, 1, 6), date(2025, 1, 8)
        )

        r1, r2 = 0.10, -0.10
        mean = (r1 + r2) / 2
        daily_std = math.sqrt(((r1 - mean) ** 2 + (r2 - mean) ** 2) / 1)
        assert result.annualized_volatility == pytest.approx(daily_std * math.sqrt(252))

    def test_start_before_data_uses_first_point(self, scenario_series):
        result = simulate_historical(
            scenario_series, 1000, date(2020, 1, 1), date(2025, 1, 8)
        )

        assert result.start_date == date(2025, 1, 6)
        assert result.shares == pytest.approx(10.0)

    def test_end_after_data_uses_last_point(self, scenario_series):
        result = simulate_historical(
            scenario_series, 1000, date(2025, 1, 6), date(2030, 1, 1)
        )

        assert result.end_date == date(2025, 1, 8)

    def test_golden_feed(self, golden_series):
        result = simulate_historical(
            golden_series, 10000, date(2025, 10, 13), date(2025, 10, 21)
        )

        assert result.trading_days == 6
        assert result.final_value == pytest.approx(10000 * 18.235 / 18.0)
        assert result.net_return_pct == pytest.approx((18.235 / 18.0 - 1) * 100)
        assert result.max_drawdown == pytest.approx((17.95 - 18.4) / 18.4)
        assert result.drawdown_peak_date == date(2025, 10, 15)
        assert result.drawdown_trough_date == date(2025, 10, 17)


class TestRangeResolution:
    """Effective start/end dates snap to observed trading days."""

    def test_weekend_dates_snap_inward(self):
        # Weekly observations on Mondays
        series = make_series([10, 11, 12, 13, 14], start=date(2025, 1, 6), step_days=7)

        # Saturday before 2nd Monday to Sunday before 5th Monday
        result = simulate_historical(series, 500, date(2025, 1, 11), date(2025, 2, 2))

        assert result.start_date == date(2025, 1, 13)
        assert result.end_date == date(2025, 1, 27)
        assert result.trading_days == MIN_WINDOW_POINTS
        assert result.final_value == pytest.approx(500 * 13 / 11)

    def test_resolve_window_indices(self):
        series = make_series([10, 11, 12, 13, 14], start=date(2025, 1, 6), step_days=7)

        assert resolve_window(series, date(2025, 1, 7), date(2025, 1, 27)) == (1, 3)
        assert resolve_window(series, date(2025, 1, 6), date(2025, 2, 3)) == (0, 4)

    def test_resolve_window_gap(self):
        """A range inside a gap resolves to start index past end index."""
        series = make_series([10, 11], start=date(2025, 1, 6), step_days=7)

        start_idx, end_idx = resolve_window(series, date(2025, 1, 7), date(2025, 1, 10))

        assert start_idx > end_idx

    def test_result_dates_are_observed(self, golden_series):
        """Requested 16.10 (bad row) and 19.10 (weekend) are not used."""
        result = simulate_historical(
            golden_series, 1000, date(2025, 10, 16), date(2025, 10, 21)
        )

        assert result.start_date == date(2025, 10, 17)
        assert result.end_date == date(2025, 10, 21)
        assert result.trading_days == 3


class TestProperties:
    """Invariants that hold for every valid window."""

    def test_drawdown_zero_for_rising_prices(self):
        series = make_series([100, 101, 101, 105, 110])

        result = simulate_historical(series, 1000, date(2025, 1, 6), date(2025, 1, 10))

        assert result.max_drawdown == 0.0
        assert result.drawdown_peak_date is None

    def test_drawdown_negative_with_any_dip(self):
        series = make_series([100, 101, 100.5, 105, 110])

        result = simulate_historical(series, 1000, date(2025, 1, 6), date(2025, 1, 10))

        assert result.max_drawdown < 0

    def test_zero_volatility_for_identical_returns(self):
        series = make_series([100, 200, 400, 800])

        result = simulate_historical(series, 1000, date(2025, 1, 6), date(2025, 1, 9))

        assert result.annualized_volatility == 0.0

    def test_positive_volatility_for_varying_returns(self, scenario_series):
        result = simulate_historical(scenario_series, 1000, date(2025, 1, 6), date(2025, 1, 8))

        assert result.annualized_volatility > 0

    def test_net_return_sign(self):
        rising = simulate_historical(make_series([100, 90, 120]), 1000, date(2025, 1, 6), date(2025, 1, 8))
        falling = simulate_historical(make_series([100, 110, 80]), 1000, date(2025, 1, 6), date(2025, 1, 8))

        assert rising.net_return_pct > 0 and rising.final_value > rising.initial_investment
        assert falling.net_return_pct < 0 and falling.final_value < falling.initial_investment

    def test_input_series_not_mutated(self, scenario_series):
        snapshot = list(scenario_series)

        simulate_historical(scenario_series, 1000, date(2025, 1, 6), date(2025, 1, 8))

        assert scenario_series == snapshot

    def test_chart_data(self, scenario_series):
        result = simulate_historical(scenario_series, 1000, date(2025, 1, 6), date(2025, 1, 8))

        assert [p.price for p in result.chart_data] == [100.0, 110.0, 99.0]
        assert result.chart_data[0].label == '06 ene 25'
        assert result.chart_data[0].date == date(2025, 1, 6)

    def test_result_is_immutable(self, scenario_series):
        result = simulate_historical(scenario_series, 1000, date(2025, 1, 6), date(2025, 1, 8))

        with pytest.raises(AttributeError):
            result.final_value = 0

    def test_datetime_inputs_accepted(self, scenario_series):
        result = simulate_historical(
            scenario_series, 1000, datetime(2025, 1, 6, 12), datetime(2025, 1, 8, 12)
        )

        assert result.end_date == date(2025, 1, 8)

    def test_to_dict(self, scenario_series):
        payload = simulate_historical(
            scenario_series, 1000, date(2025, 1, 6), date(2025, 1, 8)
        ).to_dict()

        assert payload['start_date'] == '2025-01-06'
        assert payload['drawdown_trough_date'] == '2025-01-08'
        assert len(payload['chart_data']) == 3


class TestValidation:
    """Typed errors for invalid inputs."""

    @pytest.mark.parametrize("investment", [0, -100, float('nan'), float('inf'), "1000", None, True])
    def test_invalid_investment(self, scenario_series, investment):
        with pytest.raises(InvalidInputError) as exc_info:
            simulate_historical(scenario_series, investment, date(2025, 1, 6), date(2025, 1, 8))

        assert exc_info.value.field == 'initial_investment'

    def test_invalid_date_type(self, scenario_series):
        with pytest.raises(InvalidInputError, match="start_date"):
            simulate_historical(scenario_series, 1000, "2025-01-06", date(2025, 1, 8))

    def test_start_equals_end(self, scenario_series):
        with pytest.raises(InvalidRangeError):
            simulate_historical(scenario_series, 1000, date(2025, 1, 7), date(2025, 1, 7))

    def test_start_after_end(self, scenario_series):
        with pytest.raises(InvalidRangeError):
            simulate_historical(scenario_series, 1000, date(2025, 1, 8), date(2025, 1, 6))

    def test_range_after_data(self, scenario_series):
        with pytest.raises(NoDataInRangeError, match="available data covers 2025-01-06 to 2025-01-08"):
            simulate_historical(scenario_series, 1000, date(2026, 1, 1), date(2026, 2, 1))

    def test_range_before_data(self, scenario_series):
        with pytest.raises(NoDataInRangeError):
            simulate_historical(scenario_series, 1000, date(2020, 1, 1), date(2020, 2, 1))

    def test_empty_series(self):
        with pytest.raises(NoDataInRangeError, match="no price data available"):
            simulate_historical([], 1000, date(2025, 1, 1), date(2025, 2, 1))

    def test_two_points_insufficient(self, scenario_series):
        with pytest.raises(InsufficientDataError, match="2 price points"):
            simulate_historical(scenario_series, 1000, date(2025, 1, 6), date(2025, 1, 7))

    def test_range_inside_gap_insufficient(self):
        series = make_series([10, 11, 12], start=date(2025, 1, 6), step_days=7)

        with pytest.raises(InsufficientDataError, match="0 price points"):
            simulate_historical(series, 1000, date(2025, 1, 7), date(2025, 1, 10))

    def test_unsorted_series_rejected(self):
        series = [
            PricePoint(date(2025, 1, 3), 99.0),
            PricePoint(date(2025, 1, 1), 100.0),
            PricePoint(date(2025, 1, 2), 110.0),
        ]

        with pytest.raises(InvalidInputError, match="not ascending") as exc_info:
            simulate_historical(series, 1000, date(2024, 12, 1), date(2025, 2, 1))

        assert exc_info.value.field == 'series'

    def test_duplicate_dates_allowed(self):
        series = make_series([100, 110, 99])
        series.insert(1, PricePoint(series[0].date, 100.0))

        result = simulate_historical(series, 1000, date(2025, 1, 6), date(2025, 1, 8))

        assert result.trading_days == 4
