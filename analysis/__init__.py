"""
Analysis Engine Module

Simulation engines over a parsed price series:
- Historical back-test (net return, annualized volatility, maximum drawdown)
- Future projection with monthly compounding
- Date-range presets over the available data
"""

__version__ = "0.1.0"
