"""
Tests for the CSV file adapter - reading the price feed from disk.
"""

import pytest
from datetime import date
from pathlib import Path

from ingestion.providers.csv_file_adapter import (
    load_price_series,
    resolve_csv_path,
    CsvFileAdapterError,
    DEFAULT_PRICE_CSV_PATH,
)

GOLDEN_CSV = Path(__file__).parent.parent.parent / 'tests/fixtures/golden/sigma_prices_sample.csv'


class TestResolveCsvPath:
    """Tests for path resolution."""

    def test_explicit_path_wins(self, monkeypatch):
        monkeypatch.setenv('PRICE_CSV_PATH', '/from/env.csv')

        assert resolve_csv_path('/explicit.csv') == Path('/explicit.csv')

    def test_env_var_used(self, monkeypatch):
        monkeypatch.setenv('PRICE_CSV_PATH', '/from/env.csv')

        assert resolve_csv_path() == Path('/from/env.csv')

    def test_default_path(self, monkeypatch):
        monkeypatch.delenv('PRICE_CSV_PATH', raising=False)

        assert resolve_csv_path() == Path(DEFAULT_PRICE_CSV_PATH)


class TestLoadPriceSeries:
    """Tests for load_price_series function."""

    def test_load_golden_feed(self):
        series = load_price_series(GOLDEN_CSV)

        assert len(series) == 6
        assert series[0].date == date(2025, 10, 13)
        assert series[-1].date == date(2025, 10, 21)

    def test_load_from_env(self, monkeypatch):
        monkeypatch.setenv('PRICE_CSV_PATH', str(GOLDEN_CSV))

        assert len(load_price_series()) == 6

    def test_missing_file(self, tmp_path):
        with pytest.raises(CsvFileAdapterError, match="Price feed not found"):
            load_price_series(tmp_path / 'missing.csv')

    def test_empty_file(self, tmp_path):
        path = tmp_path / 'empty.csv'
        path.write_text('', encoding='utf-8')

        assert load_price_series(path) == []

    def test_undecodable_file(self, tmp_path):
        path = tmp_path / 'latin1.csv'
        path.write_bytes('"Fecha","Último"\n'.encode('latin-1'))

        with pytest.raises(CsvFileAdapterError, match="Failed to read"):
            load_price_series(path)
