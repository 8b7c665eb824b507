"""
Account Snapshot - One validated view of the account per refresh.

Backend payloads are loosely typed (camelCase or snake_case keys, numbers
as strings, missing fields). They are coerced here, once, so nothing
downstream needs to guard against NaN or None.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional

from .numeric import safe_float, safe_int


logger = logging.getLogger(__name__)


FIELD_ALIASES = {
    'account_id': ('account_id', 'accountId', 'login', 'id'),
    'balance': ('balance', 'current_balance', 'currentBalance'),
    'equity': ('equity',),
    'daily_profit': ('daily_profit', 'dailyProfit'),
    'weekly_profit': ('weekly_profit', 'weeklyProfit'),
    'monthly_profit': ('monthly_profit', 'monthlyProfit'),
    'open_positions': ('open_positions', 'openPositions', 'positions'),
    'currency': ('currency',),
}


def _pick(payload: Dict[str, Any], name: str) -> Any:
    for key in FIELD_ALIASES[name]:
        if key in payload:
            return payload[key]
    return None


@dataclass(frozen=True)
class AccountSnapshot:
    """Account state as of one refresh."""
    account_id: str
    balance: float
    equity: float
    daily_profit: float = 0.0
    weekly_profit: float = 0.0
    monthly_profit: float = 0.0
    open_positions: int = 0
    currency: str = "USD"
    captured_at: datetime = field(default_factory=datetime.now)

    def sizing_balance(self, use_equity: bool = False) -> float:
        """Value used as the level lookup key."""
        return self.equity if use_equity else self.balance

    @classmethod
    def from_payload(cls, payload: Dict[str, Any], captured_at: Optional[datetime] = None) -> "AccountSnapshot":
        """
        Build a snapshot from a backend account payload.

        Unreadable numbers become 0 (logged at WARNING). Missing equity
        falls back to balance. open_positions may be a count or a list.
        """
        values = {}
        for name in ('balance', 'equity', 'daily_profit', 'weekly_profit', 'monthly_profit'):
            raw = _pick(payload, name)
            value = safe_float(raw, default=None)
            if value is None:
                if raw is not None:
                    logger.warning(f"Unreadable {name} in account payload: {raw!r}, using 0")
                value = 0.0
            values[name] = value

        if _pick(payload, 'equity') is None:
            values['equity'] = values['balance']

        raw_positions = _pick(payload, 'open_positions')
        if isinstance(raw_positions, (list, tuple)):
            open_positions = len(raw_positions)
        else:
            open_positions = safe_int(raw_positions)

        account_id = _pick(payload, 'account_id')

        return cls(
            account_id="" if account_id is None else str(account_id),
            balance=values['balance'],
            equity=values['equity'],
            daily_profit=values['daily_profit'],
            weekly_profit=values['weekly_profit'],
            monthly_profit=values['monthly_profit'],
            open_positions=open_positions,
            currency=str(_pick(payload, 'currency') or "USD"),
            captured_at=captured_at or datetime.now(),
        )
