"""
Data Module - Simulated market data for demo and offline mode.
"""

from .price_simulator import PriceQuote, RandomWalkQuoteGenerator


__all__ = [
    'PriceQuote',
    'RandomWalkQuoteGenerator',
]
