"""
Quote Simulator - Random-walk XAUUSD quotes for demo and offline mode.

Each generator owns its price and random state; nothing is shared at
module level, so independent generators never affect each other.
"""

import logging
from dataclasses import dataclass, field, asdict
from datetime import datetime
from typing import Any, Dict, List

import numpy as np

logger = logging.getLogger(__name__)


@dataclass
class PriceQuote:
    """One simulated quote."""
    symbol: str
    name: str
    bid: float
    ask: float
    spread: float
    high: float
    low: float
    change: float
    change_percent: float
    timestamp: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> Dict[str, Any]:
        result = asdict(self)
        result['timestamp'] = self.timestamp.isoformat()
        return result


class RandomWalkQuoteGenerator:
    """
    Bounded random walk for a single symbol.

    Each step moves the mid price uniformly within +/- max_step and
    clamps it to [floor, ceiling]. Change is measured against the
    reference (previous close) price.
    """

    def __init__(
        self,
        symbol: str = "XAUUSDm",
        name: str = "Gold vs US Dollar",
        base_price: float = 2045.50,
        reference_price: float = 2040.25,
        floor: float = 2000.0,
        ceiling: float = 2100.0,
        spread: float = 0.50,
        max_step: float = 2.0,
        high_offset: float = 5.30,
        low_offset: float = 8.20,
        seed: int = None
    ):
        if not floor <= base_price <= ceiling:
            raise ValueError(f"base_price {base_price} outside [{floor}, {ceiling}]")

        self.symbol = symbol
        self.name = name
        self.price = base_price
        self.reference_price = reference_price
        self.floor = floor
        self.ceiling = ceiling
        self.spread = spread
        self.max_step = max_step
        self.high_offset = high_offset
        self.low_offset = low_offset

        self._rng = np.random.default_rng(seed)

        logger.debug(f"Quote generator for {symbol} starting at {base_price:.2f}")

    def step(self) -> float:
        """Advance the walk and return the new mid price."""
        move = self._rng.uniform(-self.max_step, self.max_step)
        self.price = float(np.clip(self.price + move, self.floor, self.ceiling))
        return self.price

    def next_quote(self, timestamp: datetime = None) -> PriceQuote:
        price = self.step()
        change = price - self.reference_price

        return PriceQuote(
            symbol=self.symbol,
            name=self.name,
            bid=round(price, 2),
            ask=round(price + self.spread, 2),
            spread=self.spread,
            high=round(price + self.high_offset, 2),
            low=round(price - self.low_offset, 2),
            change=round(change, 2),
            change_percent=round(change / self.reference_price * 100, 2),
            timestamp=timestamp or datetime.now(),
        )

    def take(self, n: int) -> List[PriceQuote]:
        """Next n quotes."""
        return [self.next_quote() for _ in range(n)]
