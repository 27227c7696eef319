"""
Stock Price Aggregator.

Resilient price sourcing, caching and correlation analytics behind the
stock dashboard.
"""

__version__ = "1.0.0"
