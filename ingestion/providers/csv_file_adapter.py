"""
CSV file adapter for the static fund price feed.
Thin IO layer - reads the file and hands the text to the normalizer.
"""

import logging
import os
from pathlib import Path
from typing import List, Optional, Union

from dotenv import load_dotenv

from ingestion.models import PricePoint
from ingestion.transforms.normalizers import parse_price_csv

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_PRICE_CSV_PATH = './data/historical_prices.csv'


class CsvFileAdapterError(Exception):
    """Raised when the price feed file cannot be read."""
    pass


def resolve_csv_path(path: Optional[Union[str, Path]] = None) -> Path:
    """
    Resolve the price feed location.

    Args:
        path: Explicit path (default: PRICE_CSV_PATH env var, then
              ./data/historical_prices.csv)

    Returns:
        Path to the CSV file
    """
    if path is None:
        path = os.getenv('PRICE_CSV_PATH', DEFAULT_PRICE_CSV_PATH)
    return Path(path)


def load_price_series(
    path: Optional[Union[str, Path]] = None,
    encoding: str = 'utf-8'
) -> List[PricePoint]:
    """
    Load and parse the fund price feed from disk.

    Args:
        path: CSV file path (see resolve_csv_path for defaults)
        encoding: File encoding

    Returns:
        Ascending list of PricePoint

    Raises:
        CsvFileAdapterError: If the file is missing or unreadable
    """
    csv_path = resolve_csv_path(path)

    if not csv_path.exists():
        raise CsvFileAdapterError(f"Price feed not found: {csv_path}")

    try:
        text = csv_path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as e:
        raise CsvFileAdapterError(f"Failed to read price feed {csv_path}: {e}") from e

    series = parse_price_csv(text)
    logger.info(f"Loaded {len(series)} price points from {csv_path}")

    return series
