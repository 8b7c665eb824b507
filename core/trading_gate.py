# core/trading_gate.py
"""
Trading-Permission Gate.

Two independent gates decide whether a new trade may be opened:
- target gate: today's realized profit has reached the level's daily target
- position gate: a position is already open (one at a time)

This module owns the target gate and composes it with the position
count supplied by the caller. Both are advisory; every trade-initiation
point must honor them.
"""

import logging
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional, Tuple

from config.money_management import get_params
from .formatting import format_currency
from .level_table import LevelTable
from .numeric import safe_float, safe_int
from .tier_resolver import current_tier


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GateDecision:
    """Result of the daily target gate."""
    stop: bool
    reason: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class TradePermission:
    """Combined result of both gates."""
    allowed: bool
    target_reached: bool
    position_open: bool
    reasons: Tuple[str, ...] = ()

    @property
    def reason(self) -> Optional[str]:
        return "; ".join(self.reasons) if self.reasons else None

    def to_dict(self) -> Dict[str, Any]:
        result = asdict(self)
        result['reasons'] = list(self.reasons)
        return result


def should_stop_trading(balance, daily_profit, table: LevelTable = None) -> GateDecision:
    """
    Check whether today's profit target has been reached.

    Args:
        balance: Account balance or equity (selects the level)
        daily_profit: Profit realized today, may be negative
        table: Level table (process default if None)

    Returns:
        GateDecision(stop=True, reason=...) once daily_profit >= daily target
    """
    daily_profit = safe_float(daily_profit)
    tier = current_tier(balance, table)

    if daily_profit >= tier.daily_target:
        reason = (
            f"Daily target reached at level {tier.level}: "
            f"{format_currency(daily_profit)} of {format_currency(tier.daily_target)}. "
            f"Stop trading for today."
        )
        return GateDecision(stop=True, reason=reason)

    return GateDecision(stop=False, reason=None)


def check_trade_permission(
    balance,
    daily_profit,
    open_positions,
    table: LevelTable = None,
    max_open_positions: int = None
) -> TradePermission:
    """
    Combine the target gate with the open-position gate.

    Args:
        balance: Account balance or equity
        daily_profit: Profit realized today
        open_positions: Number of positions currently open
        table: Level table (process default if None)
        max_open_positions: Position cap (config default if None)

    Returns:
        TradePermission, allowed only when neither gate is tripped
    """
    if max_open_positions is None:
        max_open_positions = get_params()['max_open_positions']

    decision = should_stop_trading(balance, daily_profit, table)
    open_count = safe_int(open_positions)
    position_open = open_count >= max_open_positions

    reasons = []
    if decision.stop:
        reasons.append(decision.reason)
    if position_open:
        reasons.append(f"{open_count} position(s) already open, limit is {max_open_positions}")

    permission = TradePermission(
        allowed=not (decision.stop or position_open),
        target_reached=decision.stop,
        position_open=position_open,
        reasons=tuple(reasons),
    )

    if not permission.allowed:
        logger.info(f"Trading blocked: {permission.reason}")

    return permission
