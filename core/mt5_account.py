"""
MT5 Account Source - Read-only account snapshots from a MetaTrader 5 terminal.

Reads balance, equity, open positions and this month's closed deals and
folds them into an AccountSnapshot. Never sends orders.

Usage:
    source = MT5AccountSource(MT5Credentials(login, password, server, path))
    source.connect()
    snapshot = source.snapshot()
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, List, Optional

from .account_snapshot import AccountSnapshot
from .exceptions import AccountUnavailable, ConnectionError
from .numeric import safe_float
from .period_profit import period_profits, period_start


logger = logging.getLogger(__name__)


@dataclass
class MT5Credentials:
    """MT5 login credentials (all optional: attach to the running terminal)."""
    login: Optional[int] = None
    password: Optional[str] = None
    server: Optional[str] = None
    path: Optional[str] = None  # Path to terminal64.exe
    timeout: int = 60000  # Connection timeout in ms


class MT5AccountSource:
    """
    Snapshot reader over the MetaTrader5 module.

    A module-like object exposing initialize/account_info/positions_get/
    history_deals_get can be injected instead of the real package.
    """

    def __init__(
        self,
        credentials: MT5Credentials = None,
        symbol: str = None,
        mt5_module: Any = None
    ):
        """
        Initialize account source.

        Args:
            credentials: MT5 login credentials
            symbol: Only count positions on this symbol (all if None)
            mt5_module: MetaTrader5-compatible module (real package if None)
        """
        if mt5_module is None:
            import MetaTrader5 as mt5_module

        self.mt5 = mt5_module
        self.credentials = credentials or MT5Credentials()
        self.symbol = symbol
        self.connected = False

    def connect(self) -> bool:
        """
        Attach to the MT5 terminal.

        Raises:
            ConnectionError: terminal initialization failed
        """
        creds = self.credentials
        kwargs = {
            key: value for key, value in (
                ('path', creds.path),
                ('login', creds.login),
                ('password', creds.password),
                ('server', creds.server),
            ) if value
        }

        if not self.mt5.initialize(timeout=creds.timeout, **kwargs):
            error = self.mt5.last_error()
            logger.error(f"MT5 initialization failed: {error}")
            raise ConnectionError(f"MT5 initialization failed: {error}")

        self.connected = True
        logger.info(f"Connected to MT5{f' as {creds.login}' if creds.login else ''}")
        return True

    def disconnect(self):
        if self.connected:
            self.mt5.shutdown()
            self.connected = False
            logger.info("Disconnected from MT5")

    def _open_positions(self) -> List[Any]:
        if self.symbol:
            positions = self.mt5.positions_get(symbol=self.symbol)
        else:
            positions = self.mt5.positions_get()
        return list(positions or ())

    def _closed_deals(self, now: datetime) -> List[Any]:
        # Weeks can start in the previous month
        start = min(period_start(now, 'week'), period_start(now, 'month'))
        deals = self.mt5.history_deals_get(start, now)
        if deals is None:
            logger.warning(f"No deal history from MT5: {self.mt5.last_error()}")
            return []

        trade_types = (
            getattr(self.mt5, 'DEAL_TYPE_BUY', 0),
            getattr(self.mt5, 'DEAL_TYPE_SELL', 1),
        )
        deals = [d for d in deals if getattr(d, 'type', None) in trade_types]
        if self.symbol:
            deals = [d for d in deals if getattr(d, 'symbol', None) == self.symbol]
        return deals

    def snapshot(self, now: datetime = None) -> AccountSnapshot:
        """
        Read a fresh account snapshot.

        Raises:
            AccountUnavailable: terminal returned no account info
        """
        now = now or datetime.now()

        info = self.mt5.account_info()
        if info is None:
            raise AccountUnavailable(f"MT5 returned no account info: {self.mt5.last_error()}")

        profits = period_profits(self._closed_deals(now), now)

        snapshot = AccountSnapshot(
            account_id=str(info.login),
            balance=safe_float(info.balance),
            equity=safe_float(info.equity),
            daily_profit=profits['day'],
            weekly_profit=profits['week'],
            monthly_profit=profits['month'],
            open_positions=len(self._open_positions()),
            currency=info.currency or "USD",
            captured_at=now,
        )

        logger.debug(f"MT5 snapshot: {snapshot}")
        return snapshot

    def __enter__(self):
        self.connect()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.disconnect()
        return False
