# core/status.py
"""
Money Management Status - Everything the dashboard shows for one account.

Built from a single AccountSnapshot: current and next level, progress
toward the next level and toward each period target, the recommended
lot size and both trading gates.
"""

import logging
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

from .account_snapshot import AccountSnapshot
from .level_table import LevelTable, Tier, resolve_table
from .numeric import safe_float
from .progress import (
    daily_target_progress,
    is_target_reached,
    monthly_target_progress,
    progress_to_next_level,
    remaining_daily_target,
    target_progress,
    weekly_target_progress,
)
from .tier_resolver import current_tier, next_tier
from .trading_gate import GateDecision, TradePermission, check_trade_permission, should_stop_trading


logger = logging.getLogger(__name__)


@dataclass
class AccountProgress:
    """Per-account level and target state."""
    account_id: str
    current_balance: float
    current_level: int
    current_lot_size: float
    daily_profit: float
    weekly_profit: float
    monthly_profit: float
    daily_target_reached: bool
    weekly_target_reached: bool
    monthly_target_reached: bool
    open_positions: int


@dataclass
class MoneyManagementStatus:
    """Full money management view of one account."""
    account_id: str
    balance: float
    current_level: Tier
    next_level: Optional[Tier]
    progress_to_next_level: float
    daily_target_progress: float
    weekly_target_progress: float
    monthly_target_progress: float
    remaining_daily_target: float
    recommended_lot_size: float
    should_stop_trading: GateDecision
    trade_permission: TradePermission
    account_progress: AccountProgress

    def to_dict(self) -> Dict[str, Any]:
        result = asdict(self)
        result['trade_permission'] = self.trade_permission.to_dict()
        return result


def build_status(
    snapshot: AccountSnapshot,
    table: LevelTable = None,
    use_equity: bool = False,
    max_open_positions: int = None
) -> MoneyManagementStatus:
    """
    Compute the money management status for a snapshot.

    Args:
        snapshot: Account state for this refresh
        table: Level table (process default if None)
        use_equity: Select the level by equity instead of balance
        max_open_positions: Position cap (config default if None)

    Returns:
        MoneyManagementStatus
    """
    table = resolve_table(table)
    balance = snapshot.sizing_balance(use_equity)

    tier = current_tier(balance, table)
    decision = should_stop_trading(balance, snapshot.daily_profit, table)
    permission = check_trade_permission(
        balance, snapshot.daily_profit, snapshot.open_positions, table,
        max_open_positions=max_open_positions
    )

    progress = AccountProgress(
        account_id=snapshot.account_id,
        current_balance=balance,
        current_level=tier.level,
        current_lot_size=tier.lot_size,
        daily_profit=snapshot.daily_profit,
        weekly_profit=snapshot.weekly_profit,
        monthly_profit=snapshot.monthly_profit,
        daily_target_reached=decision.stop,
        weekly_target_reached=is_target_reached(snapshot.weekly_profit, tier.weekly_target),
        monthly_target_reached=is_target_reached(snapshot.monthly_profit, tier.monthly_target),
        open_positions=snapshot.open_positions,
    )

    status = MoneyManagementStatus(
        account_id=snapshot.account_id,
        balance=balance,
        current_level=tier,
        next_level=next_tier(balance, table),
        progress_to_next_level=progress_to_next_level(balance, table),
        daily_target_progress=daily_target_progress(balance, snapshot.daily_profit, table),
        weekly_target_progress=weekly_target_progress(balance, snapshot.weekly_profit, table),
        monthly_target_progress=monthly_target_progress(balance, snapshot.monthly_profit, table),
        remaining_daily_target=remaining_daily_target(balance, snapshot.daily_profit, table),
        recommended_lot_size=tier.lot_size,
        should_stop_trading=decision,
        trade_permission=permission,
        account_progress=progress,
    )

    logger.debug(
        f"[{snapshot.account_id}] level {tier.level} lot {tier.lot_size} "
        f"progress {status.progress_to_next_level:.1f}% daily {status.daily_target_progress:.1f}%"
    )
    return status


def lot_size_for(balance, table: LevelTable = None) -> Dict[str, float]:
    """Lot size lookup: balance, lot_size and level."""
    tier = current_tier(balance, table)
    return {
        'balance': safe_float(balance),
        'lot_size': tier.lot_size,
        'level': tier.level,
    }


def daily_progress(snapshot: AccountSnapshot, table: LevelTable = None, use_equity: bool = False) -> Dict[str, Any]:
    """Today's profit against the daily target."""
    tier = current_tier(snapshot.sizing_balance(use_equity), table)
    return {
        'daily_profit': snapshot.daily_profit,
        'daily_target': tier.daily_target,
        'progress_percent': target_progress(snapshot.daily_profit, tier.daily_target),
        'target_reached': snapshot.daily_profit >= tier.daily_target,
    }
