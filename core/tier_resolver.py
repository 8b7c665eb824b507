"""
Tier Resolver - Map an account balance to its level.

A balance sits at the highest level whose threshold it meets (equal
counts). Balances below the first threshold, zero, negative or
unreadable, are floored to level 1 so an account always has a lot size.
"""

import logging
from bisect import bisect_right
from typing import Optional

from .level_table import LevelTable, Tier, resolve_table
from .numeric import safe_float


logger = logging.getLogger(__name__)


def _current_index(balance: float, table: LevelTable) -> int:
    # Number of thresholds <= balance, minus one; floor at the first level
    return max(bisect_right(table.thresholds, balance) - 1, 0)


def current_tier(balance, table: LevelTable = None) -> Tier:
    """
    Level the balance currently qualifies for.

    Args:
        balance: Account balance or equity
        table: Level table (process default if None)

    Returns:
        Tier with the largest threshold <= balance, or level 1
    """
    table = resolve_table(table)
    return table[_current_index(safe_float(balance), table)]


def next_tier(balance, table: LevelTable = None) -> Optional[Tier]:
    """Level after the current one, or None at the top of the ladder."""
    table = resolve_table(table)
    index = _current_index(safe_float(balance), table) + 1
    if index < len(table):
        return table[index]
    return None


def recommended_lot_size(balance, table: LevelTable = None) -> float:
    """Lot size to trade at for this balance."""
    tier = current_tier(balance, table)
    logger.debug(f"Balance {safe_float(balance):.2f} -> level {tier.level}, lot {tier.lot_size}")
    return tier.lot_size
