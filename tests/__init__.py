"""
Test Suite for the Fund Investment Simulator

Includes:
- Unit tests for locale parsing and CSV ingestion
- Unit tests for return, volatility, drawdown and projection calculations
- Engine tests for the historical and future simulators
- CLI tests against a golden price feed
"""
