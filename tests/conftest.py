"""
Pytest configuration and fixtures.
"""

import sys
import logging
from pathlib import Path

import pytest

# Configure logging for tests
logging.basicConfig(level=logging.WARNING)

# Add project root to path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from core.account_snapshot import AccountSnapshot
from core.level_table import LevelTable, Tier, reference_level_table


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "stress: property sweeps over many generated balances"
    )


@pytest.fixture
def reference_table():
    """The shipped 20-level ladder."""
    return reference_level_table()


@pytest.fixture
def zero_target_table():
    """Three levels, the first one with no profit targets."""
    return LevelTable([
        Tier(level=1, balance_threshold=0.0, lot_size=0.01,
             daily_target=0.0, weekly_target=0.0, monthly_target=0.0),
        Tier(level=2, balance_threshold=500.0, lot_size=0.02,
             daily_target=10.0, weekly_target=50.0, monthly_target=200.0),
        Tier(level=3, balance_threshold=1000.0, lot_size=0.05,
             daily_target=20.0, weekly_target=100.0, monthly_target=400.0),
    ])


@pytest.fixture
def make_snapshot():
    """Factory for account snapshots with sensible defaults."""
    def _make(balance=100.0, equity=None, daily_profit=0.0, weekly_profit=0.0,
              monthly_profit=0.0, open_positions=0, account_id="TEST"):
        return AccountSnapshot(
            account_id=account_id,
            balance=balance,
            equity=balance if equity is None else equity,
            daily_profit=daily_profit,
            weekly_profit=weekly_profit,
            monthly_profit=monthly_profit,
            open_positions=open_positions,
        )
    return _make
