"""
Property sweeps over many generated balances and profits.

Run with: pytest tests/stress -m stress
"""

import numpy as np
import pytest

from core.level_table import reference_level_table
from core.progress import daily_target_progress, progress_to_next_level
from core.tier_resolver import current_tier, next_tier, recommended_lot_size
from core.trading_gate import should_stop_trading


pytestmark = pytest.mark.stress


@pytest.fixture(scope="module")
def balances():
    rng = np.random.default_rng(20261014)
    thresholds = reference_level_table().thresholds
    edges = [t + d for t in thresholds for d in (-0.01, 0.0, 0.01)]
    return np.concatenate([rng.uniform(-1000, 300000, 5000), np.array(edges)])


class TestLevelLookupProperties:

    def test_level_is_highest_threshold_not_above_balance(self, reference_table, balances):
        for balance in balances:
            tier = current_tier(balance, reference_table)
            if balance < reference_table.first.balance_threshold:
                assert tier.level == 1
            else:
                assert tier.balance_threshold <= balance
                following = next_tier(balance, reference_table)
                if following is not None:
                    assert balance < following.balance_threshold

    def test_every_balance_gets_a_level(self, reference_table, balances):
        for balance in balances:
            assert 1 <= current_tier(balance, reference_table).level <= 20

    def test_next_level_is_adjacent(self, reference_table, balances):
        for balance in balances:
            following = next_tier(balance, reference_table)
            if following is not None:
                assert following.level == current_tier(balance, reference_table).level + 1

    def test_edges_hit_shipped_thresholds(self, reference_table, balances):
        for tier in reference_table:
            assert tier.balance_threshold in balances
            assert current_tier(tier.balance_threshold, reference_table).level == tier.level

    def test_top_level_saturates(self, reference_table):
        for balance in (221683.68, 300000.0, 1e9):
            assert current_tier(balance, reference_table).level == 20
            assert next_tier(balance, reference_table) is None
            assert progress_to_next_level(balance, reference_table) == 100.0

    def test_level_and_lot_never_decrease(self, reference_table, balances):
        ordered = np.sort(balances)
        levels = [current_tier(b, reference_table).level for b in ordered]
        lots = [recommended_lot_size(b, reference_table) for b in ordered]

        assert all(a <= b for a, b in zip(levels, levels[1:]))
        assert all(a <= b for a, b in zip(lots, lots[1:]))


class TestProgressProperties:

    def test_progress_is_a_percentage(self, reference_table, balances):
        rng = np.random.default_rng(7)
        for balance, profit in zip(balances, rng.uniform(-5000, 5000, len(balances))):
            assert 0.0 <= progress_to_next_level(balance, reference_table) <= 100.0
            assert 0.0 <= daily_target_progress(balance, profit, reference_table) <= 100.0

    def test_zero_target_progress(self, zero_target_table):
        rng = np.random.default_rng(11)
        for profit in rng.uniform(-100, 100, 500):
            assert daily_target_progress(100.0, profit, zero_target_table) == 0.0


class TestGateProperties:

    def test_stop_exactly_when_target_met(self, reference_table, balances):
        rng = np.random.default_rng(13)
        for balance, profit in zip(balances, rng.uniform(-50, 8000, len(balances))):
            target = current_tier(balance, reference_table).daily_target
            assert should_stop_trading(balance, profit, reference_table).stop == (profit >= target)


class TestScenarios:

    @pytest.mark.parametrize("balance,profit,level,lot,stop", [
        (100.00, 0.00, 1, 0.01, False),
        (100.00, 3.00, 1, 0.01, True),
        (150.00, 4.49, 2, 0.01, False),
        (150.00, 4.50, 2, 0.01, True),
        (224.99, 0.00, 2, 0.01, False),
        (225.00, 6.75, 3, 0.02, True),
        (50.00, 0.00, 1, 0.01, False),
        (3844.34, 100.00, 10, 0.5, False),
        (500000.00, 10000.00, 20, 50, True),
    ])
    def test_scenario(self, reference_table, balance, profit, level, lot, stop):
        assert current_tier(balance, reference_table).level == level
        assert recommended_lot_size(balance, reference_table) == lot
        assert should_stop_trading(balance, profit, reference_table).stop is stop


if __name__ == "__main__":
    pytest.main([__file__, "-v", "-m", "stress"])
