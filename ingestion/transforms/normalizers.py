"""
Normalizers for transforming the raw fund CSV feed into a price series.
Pure functions - no IO, network, or side effects.

Row layout (after the header line):
    "21.10.2025","18,235"

The whole row is wrapped in one pair of outer quotes and the two fields
are joined by the three-character delimiter '","'. A plain CSV reader
would treat the decimal comma as a field break inside unquoted rows, so
rows are split on the delimiter instead.
"""

import logging
from typing import Any, Dict, List, Tuple

from ingestion.models import PricePoint
from ingestion.transforms.parsers import (
    ParseError,
    is_missing_number,
    parse_locale_date,
    parse_locale_number,
)
from ingestion.transforms.validators import ValidationError, validate_price_point

logger = logging.getLogger(__name__)

FIELD_DELIMITER = '","'


def parse_price_csv(text: str) -> List[PricePoint]:
    """
    Parse the raw CSV blob into an ascending price series.

    Malformed rows are skipped and logged; they never abort ingestion.

    Args:
        text: Full CSV text including the header line

    Returns:
        List of PricePoint sorted ascending by date (empty if no valid rows)
    """
    series, _ = parse_price_csv_with_report(text)
    return series


def parse_price_csv_with_report(
    text: str
) -> Tuple[List[PricePoint], List[Dict[str, Any]]]:
    """
    Parse the raw CSV blob and report which rows were dropped.

    Args:
        text: Full CSV text including the header line

    Returns:
        Tuple of (series, skipped_rows). Each skipped row is a dict with
        line_number (1-based, header is line 1), line and reason.
    """
    if not text or not text.strip():
        return [], []

    lines = text.strip().splitlines()
    # Header is dropped unconditionally
    data_lines = lines[1:]

    points: List[PricePoint] = []
    skipped: List[Dict[str, Any]] = []

    for offset, line in enumerate(data_lines, start=2):
        try:
            points.append(parse_price_row(line))
        except ParseError as e:
            logger.warning(f"Skipping invalid line {offset}: {line!r} ({e})")
            skipped.append({
                'line_number': offset,
                'line': line,
                'reason': str(e),
            })

    # Stable sort keeps duplicate dates in source order
    points.sort(key=lambda p: p.date)

    if skipped:
        logger.info(f"Parsed {len(points)} price rows, skipped {len(skipped)}")

    return points, skipped


def parse_price_row(line: str) -> PricePoint:
    """
    Parse one data row into a PricePoint.

    Args:
        line: Raw row, e.g. '"21.10.2025","18,235"'

    Returns:
        PricePoint for the row

    Raises:
        ParseError: If the row does not hold a valid date and positive price
    """
    residue = line.strip()
    if residue.startswith('"'):
        residue = residue[1:]
    if residue.endswith('"'):
        residue = residue[:-1]

    columns = residue.split(FIELD_DELIMITER)
    if len(columns) < 2:
        raise ParseError(f"expected 2 fields, got {len(columns)}")

    date_text, number_text = columns[0], columns[1]

    row_date = parse_locale_date(date_text)
    if row_date is None:
        raise ParseError(f"invalid date {date_text!r}")

    price = parse_locale_number(number_text)
    if is_missing_number(price):
        raise ParseError(f"invalid number {number_text!r}")

    point = PricePoint(date=row_date, price=price)
    try:
        validate_price_point(point)
    except ValidationError as e:
        raise ParseError(str(e)) from e

    return point
