"""
Canonical price observation shared by ingestion and analysis.
"""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class PricePoint:
    """One daily net asset value observation."""
    date: date
    price: float
