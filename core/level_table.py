# core/level_table.py
"""
Level Table - Progressive lot-sizing tiers.

A level is reached when the account balance meets its threshold. Each
level carries the lot size to trade at and the daily, weekly and monthly
profit targets that stop trading for the period once hit.

The table is built once and never mutated. All lookups go through the
thresholds, so re-tuning means editing data, not code.
"""

import logging
from dataclasses import dataclass, asdict
from functools import lru_cache
from typing import Dict, Iterable, Iterator, Optional, Tuple

import numpy as np

from config.money_management import PROFILE_OVERRIDES, get_params
from .exceptions import ConfigurationError, LevelTableError


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Tier:
    """One step of the lot-sizing ladder."""
    level: int
    balance_threshold: float
    lot_size: float
    daily_target: float
    weekly_target: float
    monthly_target: float

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


class LevelTable:
    """
    Immutable ordered sequence of tiers.

    INVARIANTS (checked on construction):
    1. At least one tier
    2. Levels are 1, 2, 3, ... in order
    3. Thresholds strictly increase
    4. Lot sizes are positive and never decrease
    5. Targets are finite and non-negative
    """

    def __init__(self, tiers: Iterable[Tier]):
        self._tiers: Tuple[Tier, ...] = tuple(tiers)
        self._validate()
        self._thresholds: Tuple[float, ...] = tuple(t.balance_threshold for t in self._tiers)

    def _validate(self):
        if not self._tiers:
            raise LevelTableError("Level table is empty")

        previous: Optional[Tier] = None
        for expected_level, tier in enumerate(self._tiers, start=1):
            if tier.level != expected_level:
                raise LevelTableError(
                    f"Expected level {expected_level}, got {tier.level}",
                    level=tier.level
                )

            values = (tier.balance_threshold, tier.lot_size, tier.daily_target,
                      tier.weekly_target, tier.monthly_target)
            if not all(np.isfinite(v) for v in values):
                raise LevelTableError(f"Level {tier.level} has a non-finite value", level=tier.level)

            if tier.balance_threshold < 0:
                raise LevelTableError(f"Level {tier.level} threshold is negative", level=tier.level)

            if tier.lot_size <= 0:
                raise LevelTableError(f"Level {tier.level} lot size must be positive", level=tier.level)

            if min(tier.daily_target, tier.weekly_target, tier.monthly_target) < 0:
                raise LevelTableError(f"Level {tier.level} has a negative target", level=tier.level)

            if previous is not None:
                if tier.balance_threshold <= previous.balance_threshold:
                    raise LevelTableError(
                        f"Level {tier.level} threshold {tier.balance_threshold} "
                        f"not above level {previous.level} ({previous.balance_threshold})",
                        level=tier.level
                    )
                if tier.lot_size < previous.lot_size:
                    raise LevelTableError(
                        f"Level {tier.level} lot size {tier.lot_size} "
                        f"below level {previous.level} ({previous.lot_size})",
                        level=tier.level
                    )

            previous = tier

    def levels(self) -> Tuple[Tier, ...]:
        """Full ordered sequence of tiers."""
        return self._tiers

    @property
    def thresholds(self) -> Tuple[float, ...]:
        return self._thresholds

    @property
    def first(self) -> Tier:
        return self._tiers[0]

    @property
    def last(self) -> Tier:
        return self._tiers[-1]

    def index_of(self, tier: Tier) -> int:
        return tier.level - 1

    def __len__(self) -> int:
        return len(self._tiers)

    def __iter__(self) -> Iterator[Tier]:
        return iter(self._tiers)

    def __getitem__(self, index: int) -> Tier:
        return self._tiers[index]

    def __repr__(self) -> str:
        return (
            f"LevelTable({len(self)} levels, "
            f"{self.first.balance_threshold:.2f} -> {self.last.balance_threshold:.2f})"
        )


# (level, threshold, lot, daily, weekly, monthly) as shipped to the app
REFERENCE_LEVELS = [
    (1, 100.00, 0.01, 3.00, 15.00, 60.00),
    (2, 150.00, 0.01, 4.50, 22.50, 90.00),
    (3, 225.00, 0.02, 6.75, 33.75, 135.00),
    (4, 337.50, 0.03, 10.13, 50.63, 202.50),
    (5, 506.25, 0.05, 15.19, 75.94, 303.75),
    (6, 759.38, 0.08, 22.78, 113.91, 455.63),
    (7, 1139.06, 0.12, 34.17, 170.83, 683.44),
    (8, 1708.59, 0.2, 51.26, 256.28, 1025.15),
    (9, 2562.89, 0.3, 76.89, 384.44, 1537.78),
    (10, 3844.34, 0.5, 115.33, 576.67, 2306.67),
    (11, 5766.51, 0.8, 172.99, 864.94, 3459.75),
    (12, 8649.76, 1.3, 259.49, 1297.46, 5189.84),
    (13, 12974.63, 2, 389.24, 1946.19, 7784.75),
    (14, 19461.94, 3, 583.86, 2919.32, 11677.28),
    (15, 29192.91, 5, 875.79, 4378.93, 17515.71),
    (16, 43789.37, 8, 1313.68, 6568.42, 26273.69),
    (17, 65684.05, 13, 1970.52, 9852.60, 39410.40),
    (18, 98526.08, 20, 2955.78, 14778.91, 59115.64),
    (19, 147789.12, 30, 4433.67, 22168.36, 88673.44),
    (20, 221683.68, 50, 6650.51, 33252.56, 133010.24),
]


def reference_level_table() -> LevelTable:
    """The 20-level reference ladder."""
    return LevelTable(Tier(*row) for row in REFERENCE_LEVELS)


def build_level_table(params: Dict) -> LevelTable:
    """
    Generate a level table from growth parameters.

    Args:
        params: Dict with base_balance, growth_factor, lot_sizes and
            daily/weekly/monthly_target_pct (see config/money_management.py)

    Returns:
        LevelTable with one level per lot size
    """
    base = float(params['base_balance'])
    growth = float(params['growth_factor'])
    lot_sizes = params['lot_sizes']

    if growth <= 1.0:
        raise LevelTableError(f"growth_factor must be above 1.0, got {growth}")

    tiers = []
    threshold = base
    for level, lot_size in enumerate(lot_sizes, start=1):
        tiers.append(Tier(
            level=level,
            balance_threshold=round(threshold, 2),
            lot_size=float(lot_size),
            daily_target=round(threshold * params['daily_target_pct'] / 100, 2),
            weekly_target=round(threshold * params['weekly_target_pct'] / 100, 2),
            monthly_target=round(threshold * params['monthly_target_pct'] / 100, 2),
        ))
        threshold *= growth

    table = LevelTable(tiers)
    logger.info(f"Built level table: {table!r}")
    return table


@lru_cache(maxsize=None)
def get_level_table(profile: str = None) -> LevelTable:
    """
    Process-wide level table.

    The default profile is the reference ladder; a named profile is
    generated from its parameters. Each table is built once.
    """
    if profile is None or profile.lower() == 'reference':
        return reference_level_table()
    if profile.lower() not in PROFILE_OVERRIDES:
        raise ConfigurationError(f"Unknown money management profile: {profile}")
    return build_level_table(get_params(profile))


def resolve_table(table: Optional[LevelTable]) -> LevelTable:
    return get_level_table() if table is None else table
