#!/usr/bin/env python3
"""
Main CLI for the Fund Investment Simulator.
Usage:
  python cli.py historical --amount 10000 --start 2020-01-01 --end 2025-01-01
  python cli.py future --initial 1000 --monthly 200 --years 10 --rate 7
  python cli.py presets
"""

import os
import sys
import json
import logging
import argparse
from datetime import date
from pathlib import Path
from typing import Any, Dict, List, Optional

import pandas as pd
from dotenv import load_dotenv

# Add project root to path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from analysis.date_presets import PRESETS, all_preset_ranges, resolve_date_preset, series_bounds
from analysis.future_simulation import simulate_future
from analysis.guardrails import InvalidInputError, SimulationError
from analysis.historical_simulation import simulate_historical
from analysis.models import FutureSimulationResult, HistoricalSimulationResult
from ingestion.providers.csv_file_adapter import CsvFileAdapterError, load_price_series
from reports.formatters import (
    format_currency_eur,
    format_date_es,
    format_fraction_as_percentage,
    format_percentage,
)

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one subcommand per simulator."""
    parser = argparse.ArgumentParser(
        description='Simulate historical and future performance of a fund investment',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python cli.py historical --amount 10000 --preset 5y
  python cli.py historical --amount 5000 --start 2020-03-01 --end 2024-03-01
  python cli.py future --initial 1000 --monthly 200 --years 10 --rate 7
  python cli.py presets --csv ./data/historical_prices.csv
        """
    )
    subparsers = parser.add_subparsers(dest='command', required=True)

    historical = subparsers.add_parser('historical', help='Back-test a lump sum over real prices')
    historical.add_argument('--amount',
                            type=float,
                            help='Initial investment in EUR (default: DEFAULT_INVESTMENT or 10000)')
    historical.add_argument('--start',
                            type=date.fromisoformat,
                            help='Start date (YYYY-MM-DD, default: first date with data)')
    historical.add_argument('--end',
                            type=date.fromisoformat,
                            help='End date (YYYY-MM-DD, default: last date with data)')
    historical.add_argument('--preset',
                            choices=PRESETS,
                            help='Date range preset (overrides --start/--end)')
    historical.add_argument('--csv',
                            help='Price CSV path (default: PRICE_CSV_PATH or ./data/historical_prices.csv)')
    historical.add_argument('--output',
                            help='Write the full result as JSON to this path')

    future = subparsers.add_parser('future', help='Project a monthly contribution plan')
    future.add_argument('--initial', type=float, default=1000.0,
                        help='Initial contribution in EUR (default: 1000)')
    future.add_argument('--monthly', type=float, default=200.0,
                        help='Monthly contribution in EUR (default: 200)')
    future.add_argument('--years', type=int, default=10,
                        help='Duration in years (default: 10)')
    future.add_argument('--rate', type=float, default=7.0,
                        help='Expected annual return in percent (default: 7)')
    future.add_argument('--output',
                        help='Write the full result as JSON to this path')

    presets = subparsers.add_parser('presets', help='Show the date range of every preset')
    presets.add_argument('--csv',
                         help='Price CSV path (default: PRICE_CSV_PATH or ./data/historical_prices.csv)')

    for sub in (historical, future, presets):
        sub.add_argument('--quiet', '-q',
                         action='store_true',
                         help='Minimal output')

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    try:
        configure_logging()

        if args.command == 'historical':
            run_historical(args)
        elif args.command == 'future':
            run_future(args)
        else:
            run_presets(args)
    except (SimulationError, CsvFileAdapterError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    return 0


def configure_logging() -> None:
    """Configure root logging from LOG_LEVEL (default: WARNING)."""
    level = os.getenv('LOG_LEVEL', 'WARNING').upper()
    if not isinstance(logging.getLevelName(level), int):
        raise InvalidInputError('LOG_LEVEL', f"unknown log level {level!r}")

    logging.basicConfig(
        level=level,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s'
    )


def default_investment() -> float:
    """Initial investment from DEFAULT_INVESTMENT (default: 10000)."""
    raw = os.getenv('DEFAULT_INVESTMENT', '10000')
    try:
        return float(raw)
    except ValueError:
        raise InvalidInputError('DEFAULT_INVESTMENT', f"must be a number, got {raw!r}")


def run_historical(args: argparse.Namespace) -> HistoricalSimulationResult:
    """Load the price feed and run the historical simulator."""
    amount = args.amount if args.amount is not None else default_investment()
    series = load_price_series(args.csv)
    min_date, max_date = series_bounds(series)

    if args.preset:
        start, end = resolve_date_preset(args.preset, min_date, max_date)
    else:
        start = args.start or min_date
        end = args.end or max_date

    result = simulate_historical(series, amount, start, end)

    if args.output:
        _write_json(Path(args.output), result.to_dict())

    if args.quiet:
        print(f"{format_currency_eur(result.final_value)} ({format_percentage(result.net_return_pct)})")
    else:
        _print_historical(result)

    return result


def run_future(args: argparse.Namespace) -> FutureSimulationResult:
    """Run the future projection."""
    result = simulate_future(args.initial, args.monthly, args.years, args.rate)

    if args.output:
        _write_json(Path(args.output), result.to_dict())

    if args.quiet:
        print(format_currency_eur(result.final_value))
    else:
        _print_future(result)

    return result


def run_presets(args: argparse.Namespace) -> Dict[str, Any]:
    """Print the resolved range for every preset."""
    series = load_price_series(args.csv)
    min_date, max_date = series_bounds(series)
    ranges = all_preset_ranges(min_date, max_date)

    for preset, (start, end) in ranges.items():
        if args.quiet:
            print(f"{preset} {start.isoformat()} {end.isoformat()}")
        else:
            print(f"{preset:>4}: {format_date_es(start)} - {format_date_es(end)}")

    return ranges


def breakdown_frame(result: FutureSimulationResult) -> pd.DataFrame:
    """Yearly breakdown as a DataFrame (one row per year)."""
    return pd.DataFrame(
        [
            {
                'year': row.year,
                'starting_balance': row.starting_balance,
                'contributions': row.contributions_this_year,
                'gains': row.gains_this_year,
                'ending_balance': row.ending_balance,
            }
            for row in result.breakdown
        ],
        columns=['year', 'starting_balance', 'contributions', 'gains', 'ending_balance'],
    )


def _print_historical(result: HistoricalSimulationResult) -> None:
    print(f"Simulación de {format_currency_eur(result.initial_investment)} "
          f"desde el {format_date_es(result.start_date)} hasta el {format_date_es(result.end_date)}")
    print(f"   Valor final:        {format_currency_eur(result.final_value)}")
    print(f"   Rendimiento neto:   {format_percentage(result.net_return_pct)}")
    print(f"   Máximo drawdown:    {format_fraction_as_percentage(result.max_drawdown)}")
    print(f"   Volatilidad anual:  {format_fraction_as_percentage(result.annualized_volatility)}")
    print(f"   Sesiones:           {result.trading_days}")


def _print_future(result: FutureSimulationResult) -> None:
    print(f"Valor final:       {format_currency_eur(result.final_value)}")
    print(f"Total aportado:    {format_currency_eur(result.total_contributed)}")
    print(f"Ganancias totales: {format_currency_eur(result.total_gains)}")
    print()

    frame = breakdown_frame(result)
    for column in ('starting_balance', 'contributions', 'gains', 'ending_balance'):
        frame[column] = frame[column].map(format_currency_eur)
    print(frame.to_string(index=False))


def _write_json(path: Path, payload: Dict[str, Any]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w') as f:
        json.dump(payload, f, indent=2, default=str)
    logger.info(f"Wrote results to {path}")


if __name__ == '__main__':
    sys.exit(main())
