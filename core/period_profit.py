"""
Period Profit - Realized P&L per day, week and month from closed deals.

A deal's realized amount is profit + commission + swap + fee. Weeks
start Monday 00:00, months on the 1st. Deal times may be datetimes or
epoch seconds (as MT5 reports them).
"""

import logging
from datetime import datetime, timedelta
from typing import Any, Dict, Iterable, Optional

import pandas as pd

from .numeric import safe_float


logger = logging.getLogger(__name__)


PERIODS = ('day', 'week', 'month')
AMOUNT_FIELDS = ('profit', 'commission', 'swap', 'fee')


def period_start(now: datetime, period: str) -> datetime:
    """Start of the period containing now."""
    day_start = now.replace(hour=0, minute=0, second=0, microsecond=0)
    if period == 'day':
        return day_start
    if period == 'week':
        return day_start - timedelta(days=day_start.weekday())
    if period == 'month':
        return day_start.replace(day=1)
    raise ValueError(f"Unknown period: {period!r}")


def _field(deal: Any, name: str) -> Any:
    if isinstance(deal, dict):
        return deal.get(name)
    return getattr(deal, name, None)


def _local_naive(value: datetime) -> datetime:
    # Compare in local naive time, like datetime.now()
    if value.tzinfo is not None:
        value = value.astimezone().replace(tzinfo=None)
    return value


def _deal_time(value: Any) -> Optional[datetime]:
    if isinstance(value, str):
        parsed = pd.to_datetime(value, errors='coerce')
        if pd.isna(parsed):
            return None
        value = parsed.to_pydatetime()
    if isinstance(value, datetime):
        return _local_naive(value)
    seconds = safe_float(value, default=None)
    if seconds is None:
        return None
    return datetime.fromtimestamp(seconds)


def deals_frame(deals: Iterable[Any]) -> pd.DataFrame:
    """Deals as a frame of (time, amount), undated deals dropped."""
    rows = []
    for deal in deals:
        time = _deal_time(_field(deal, 'time'))
        if time is None:
            logger.debug(f"Skipping deal without a readable time: {deal!r}")
            continue
        amount = sum(safe_float(_field(deal, name)) for name in AMOUNT_FIELDS)
        rows.append({'time': time, 'amount': amount})

    df = pd.DataFrame(rows, columns=['time', 'amount'])
    df['time'] = pd.to_datetime(df['time'])
    return df


def realized_profit(deals: Iterable[Any], period: str, now: datetime = None) -> float:
    """
    Sum of realized amounts for deals inside the current period.

    Args:
        deals: Closed deals (dicts or objects)
        period: 'day', 'week' or 'month'
        now: Reference time (defaults to now)

    Returns:
        Realized P&L for [period start, now]
    """
    now = _local_naive(now or datetime.now())
    start = period_start(now, period)
    return _sum_between(deals_frame(deals), start, now)


def period_profits(deals: Iterable[Any], now: datetime = None) -> Dict[str, float]:
    """Realized P&L for day, week and month in one pass over the deals."""
    now = _local_naive(now or datetime.now())
    df = deals_frame(deals)
    return {period: _sum_between(df, period_start(now, period), now) for period in PERIODS}


def _sum_between(df: pd.DataFrame, start: datetime, end: datetime) -> float:
    if df.empty:
        return 0.0
    mask = (df['time'] >= pd.Timestamp(start)) & (df['time'] <= pd.Timestamp(end))
    return round(float(df.loc[mask, 'amount'].sum()), 2)
