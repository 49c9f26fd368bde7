"""
Data Ingestion Module

Turns the static fund price feed into an ordered price series:
- Locale parsing of Spanish numbers and dd.mm.yyyy dates
- Row-level recovery for malformed CSV lines
- Local CSV file loading
"""

__version__ = "0.1.0"
