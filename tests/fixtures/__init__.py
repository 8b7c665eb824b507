"""
Test Fixtures - Mock objects for testing.
"""

from .mock_mt5 import (
    MockMT5,
    MockAccountInfo,
    MockPosition,
    MockDeal,
)


__all__ = [
    'MockMT5',
    'MockAccountInfo',
    'MockPosition',
    'MockDeal',
]
