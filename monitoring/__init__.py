"""
Monitoring Module - Money management metrics.
"""

from .metrics import MoneyManagementMetrics


__all__ = [
    'MoneyManagementMetrics',
]
