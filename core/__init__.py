"""
Core Module - Money management engine for the gold trading account.
"""

from .exceptions import (
    MoneyManagementError,
    ConfigurationError,
    LevelTableError,
    ConnectionError,
    AccountUnavailable,
)

from .level_table import (
    Tier,
    LevelTable,
    reference_level_table,
    build_level_table,
    get_level_table,
)

from .tier_resolver import (
    current_tier,
    next_tier,
    recommended_lot_size,
)

from .progress import (
    progress_to_next_level,
    target_progress,
    remaining_target,
    daily_target_progress,
    weekly_target_progress,
    monthly_target_progress,
    remaining_daily_target,
    is_daily_target_reached,
)

from .trading_gate import (
    GateDecision,
    TradePermission,
    should_stop_trading,
    check_trade_permission,
)

from .account_snapshot import AccountSnapshot
from .formatting import format_currency

from .status import (
    AccountProgress,
    MoneyManagementStatus,
    build_status,
    lot_size_for,
    daily_progress,
)

from .mt5_account import (
    MT5AccountSource,
    MT5Credentials,
)


__all__ = [
    # Exceptions
    'MoneyManagementError',
    'ConfigurationError',
    'LevelTableError',
    'ConnectionError',
    'AccountUnavailable',

    # Levels
    'Tier',
    'LevelTable',
    'reference_level_table',
    'build_level_table',
    'get_level_table',
    'current_tier',
    'next_tier',
    'recommended_lot_size',

    # Progress
    'progress_to_next_level',
    'target_progress',
    'remaining_target',
    'daily_target_progress',
    'weekly_target_progress',
    'monthly_target_progress',
    'remaining_daily_target',
    'is_daily_target_reached',

    # Gates
    'GateDecision',
    'TradePermission',
    'should_stop_trading',
    'check_trade_permission',

    # Status
    'AccountSnapshot',
    'AccountProgress',
    'MoneyManagementStatus',
    'build_status',
    'lot_size_for',
    'daily_progress',
    'format_currency',

    # MT5
    'MT5AccountSource',
    'MT5Credentials',
]
