"""
Progress Calculator.

Two measures, both percentages in [0, 100]:
- level progress: where the balance sits between its level threshold
  and the next one (100 at the top level, nothing left to climb)
- target progress: period profit against the level's period target
  (0 when the target is zero, no progress is possible)

Losing periods report 0, never negative progress.
"""

from .level_table import LevelTable, resolve_table
from .numeric import clamp_pct, safe_float
from .tier_resolver import current_tier, next_tier


def progress_to_next_level(balance, table: LevelTable = None) -> float:
    """Percentage of the way from the current level to the next."""
    table = resolve_table(table)
    balance = safe_float(balance)

    current = current_tier(balance, table)
    upcoming = next_tier(balance, table)
    if upcoming is None:
        return 100.0

    span = upcoming.balance_threshold - current.balance_threshold
    return clamp_pct((balance - current.balance_threshold) / span * 100)


def target_progress(profit, target) -> float:
    """Profit as a percentage of target; 0 for a zero or negative target."""
    target = safe_float(target)
    if target <= 0:
        return 0.0
    return clamp_pct(safe_float(profit) / target * 100)


def remaining_target(profit, target) -> float:
    """Amount still needed to reach target, never negative."""
    return max(0.0, safe_float(target) - safe_float(profit))


def daily_target_progress(balance, daily_profit, table: LevelTable = None) -> float:
    return target_progress(daily_profit, current_tier(balance, table).daily_target)


def weekly_target_progress(balance, weekly_profit, table: LevelTable = None) -> float:
    return target_progress(weekly_profit, current_tier(balance, table).weekly_target)


def monthly_target_progress(balance, monthly_profit, table: LevelTable = None) -> float:
    return target_progress(monthly_profit, current_tier(balance, table).monthly_target)


def remaining_daily_target(balance, daily_profit, table: LevelTable = None) -> float:
    return remaining_target(daily_profit, current_tier(balance, table).daily_target)


def is_daily_target_reached(balance, daily_profit, table: LevelTable = None) -> bool:
    return safe_float(daily_profit) >= current_tier(balance, table).daily_target


def is_target_reached(profit, target) -> bool:
    return safe_float(profit) >= safe_float(target)
