"""
Money Management Metrics - Prometheus gauges for level, progress and gates.

Each exporter owns its CollectorRegistry, so several can coexist in one
process (and in tests).
"""

import logging
from typing import Dict, Optional

from prometheus_client import CollectorRegistry, Gauge, generate_latest

logger = logging.getLogger(__name__)


class MoneyManagementMetrics:
    """
    Gauges labelled by account.

    Usage:
        metrics = MoneyManagementMetrics()
        metrics.observe(build_status(snapshot))
        body = metrics.render()
    """

    def __init__(self, prefix: str = "gold_mm", registry: CollectorRegistry = None):
        """
        Initialize metrics.

        Args:
            prefix: Prefix for all metric names
            registry: Registry to register into (private one if None)
        """
        self.prefix = prefix
        self.registry = CollectorRegistry() if registry is None else registry
        self._metrics: Dict[str, Gauge] = {}
        self._names: Dict[str, str] = {}
        self._init_metrics()

    def _gauge(self, key: str, name: str, documentation: str):
        self._names[key] = f"{self.prefix}_{name}"
        self._metrics[key] = Gauge(
            self._names[key],
            documentation,
            ['account'],
            registry=self.registry
        )

    def _init_metrics(self):
        self._gauge('balance', 'account_balance', 'Balance used for level lookup')
        self._gauge('level', 'tier_level', 'Current money management level')
        self._gauge('lot_size', 'lot_size', 'Recommended lot size')
        self._gauge('level_progress', 'level_progress_percent', 'Progress to the next level')
        self._gauge('daily_progress', 'daily_target_progress_percent', 'Progress to the daily target')
        self._gauge('trading_stopped', 'trading_stopped', 'Daily target gate (1=stopped)')
        self._gauge('trade_allowed', 'trade_allowed', 'Both gates open (1=allowed)')

    def observe(self, status) -> None:
        """Record a MoneyManagementStatus."""
        account = status.account_id or "default"
        values = {
            'balance': status.balance,
            'level': status.current_level.level,
            'lot_size': status.recommended_lot_size,
            'level_progress': status.progress_to_next_level,
            'daily_progress': status.daily_target_progress,
            'trading_stopped': 1 if status.should_stop_trading.stop else 0,
            'trade_allowed': 1 if status.trade_permission.allowed else 0,
        }
        for key, value in values.items():
            self._metrics[key].labels(account=account).set(value)

        logger.debug(f"[{account}] metrics updated: {values}")

    def get_value(self, key: str, account: str) -> Optional[float]:
        """Current value of one gauge, None if never set."""
        return self.registry.get_sample_value(self._names[key], {'account': account})

    def render(self) -> bytes:
        """Prometheus text exposition."""
        return generate_latest(self.registry)
