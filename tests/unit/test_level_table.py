"""
Tests for the level table and its configuration.
"""

import pytest

from config.money_management import PARAMS, get_params
from core.exceptions import ConfigurationError, LevelTableError
from core.level_table import (
    LevelTable,
    Tier,
    build_level_table,
    get_level_table,
    reference_level_table,
)


def _tier(level, threshold, lot=0.01, daily=1.0, weekly=5.0, monthly=20.0):
    return Tier(level, threshold, lot, daily, weekly, monthly)


class TestReferenceTable:
    """The shipped 20-level ladder."""

    def test_has_twenty_levels(self, reference_table):
        assert len(reference_table) == 20
        assert [t.level for t in reference_table] == list(range(1, 21))

    def test_first_level(self, reference_table):
        first = reference_table.first
        assert first.balance_threshold == 100.00
        assert first.lot_size == 0.01
        assert first.daily_target == 3.00
        assert first.weekly_target == 15.00
        assert first.monthly_target == 60.00

    def test_last_level(self, reference_table):
        last = reference_table.last
        assert last.level == 20
        assert last.balance_threshold == 221683.68
        assert last.lot_size == 50
        assert last.daily_target == 6650.51

    def test_thresholds_strictly_increase(self, reference_table):
        thresholds = reference_table.thresholds
        assert all(a < b for a, b in zip(thresholds, thresholds[1:]))

    def test_lot_sizes_never_decrease(self, reference_table):
        lots = [t.lot_size for t in reference_table]
        assert all(a <= b for a, b in zip(lots, lots[1:]))

    def test_targets_pinned_to_threshold(self, reference_table):
        """Targets are 3% / 15% / 60% of the level threshold."""
        for tier in reference_table:
            assert tier.daily_target == pytest.approx(tier.balance_threshold * 0.03, rel=1e-3)
            assert tier.weekly_target == pytest.approx(tier.balance_threshold * 0.15, rel=1e-3)
            assert tier.monthly_target == pytest.approx(tier.balance_threshold * 0.60, rel=1e-3)

    def test_levels_is_read_only_tuple(self, reference_table):
        levels = reference_table.levels()
        assert isinstance(levels, tuple)
        assert levels[0] is reference_table[0]

    def test_tier_is_frozen(self, reference_table):
        with pytest.raises(AttributeError):
            reference_table[0].lot_size = 1.0

    def test_tier_to_dict(self, reference_table):
        data = reference_table[1].to_dict()
        assert data == {
            'level': 2,
            'balance_threshold': 150.00,
            'lot_size': 0.01,
            'daily_target': 4.50,
            'weekly_target': 22.50,
            'monthly_target': 90.00,
        }


class TestLevelTableValidation:
    """Invariants are enforced on construction."""

    def test_empty_table_rejected(self):
        with pytest.raises(LevelTableError):
            LevelTable([])

    def test_levels_must_start_at_one(self):
        with pytest.raises(LevelTableError) as exc:
            LevelTable([_tier(2, 100.0)])
        assert exc.value.level == 2

    def test_levels_must_be_consecutive(self):
        with pytest.raises(LevelTableError):
            LevelTable([_tier(1, 100.0), _tier(3, 200.0)])

    def test_duplicate_threshold_rejected(self):
        with pytest.raises(LevelTableError):
            LevelTable([_tier(1, 100.0), _tier(2, 100.0)])

    def test_decreasing_threshold_rejected(self):
        with pytest.raises(LevelTableError):
            LevelTable([_tier(1, 100.0), _tier(2, 50.0)])

    def test_decreasing_lot_size_rejected(self):
        with pytest.raises(LevelTableError):
            LevelTable([_tier(1, 100.0, lot=0.02), _tier(2, 150.0, lot=0.01)])

    def test_equal_lot_sizes_allowed(self):
        table = LevelTable([_tier(1, 100.0, lot=0.01), _tier(2, 150.0, lot=0.01)])
        assert len(table) == 2

    def test_non_positive_lot_rejected(self):
        with pytest.raises(LevelTableError):
            LevelTable([_tier(1, 100.0, lot=0.0)])

    def test_negative_target_rejected(self):
        with pytest.raises(LevelTableError):
            LevelTable([_tier(1, 100.0, daily=-1.0)])

    def test_negative_threshold_rejected(self):
        with pytest.raises(LevelTableError):
            LevelTable([_tier(1, -10.0)])

    def test_nan_rejected(self):
        with pytest.raises(LevelTableError):
            LevelTable([_tier(1, float('nan'))])

    def test_zero_targets_allowed(self, zero_target_table):
        assert zero_target_table.first.daily_target == 0.0

    def test_level_table_error_is_configuration_error(self):
        assert issubclass(LevelTableError, ConfigurationError)


class TestBuildLevelTable:
    """Tables generated from growth parameters."""

    def test_default_params_reproduce_reference(self, reference_table):
        generated = build_level_table(get_params())

        assert len(generated) == len(reference_table)
        for built, shipped in zip(generated, reference_table):
            assert built.level == shipped.level
            assert built.lot_size == shipped.lot_size
            assert built.balance_threshold == pytest.approx(shipped.balance_threshold, rel=1e-4)
            assert built.daily_target == pytest.approx(shipped.daily_target, rel=1e-3)

    def test_one_level_per_lot_size(self):
        params = get_params()
        params['lot_sizes'] = [0.01, 0.02, 0.05]
        assert len(build_level_table(params)) == 3

    def test_growth_factor_applied(self):
        table = build_level_table(get_params('conservative'))
        assert table[1].balance_threshold == pytest.approx(table[0].balance_threshold * 2.0)
        assert table[0].daily_target == pytest.approx(2.0)

    def test_growth_factor_must_exceed_one(self):
        params = get_params()
        params['growth_factor'] = 1.0
        with pytest.raises(LevelTableError):
            build_level_table(params)

    def test_decreasing_lot_sizes_rejected(self):
        params = get_params()
        params['lot_sizes'] = [0.05, 0.01]
        with pytest.raises(LevelTableError):
            build_level_table(params)


class TestProfiles:
    """Config profiles and the process-wide table."""

    def test_default_table_is_reference(self, reference_table):
        assert get_level_table().levels() == reference_table.levels()

    def test_default_table_built_once(self):
        assert get_level_table() is get_level_table()

    def test_reference_profile_name(self, reference_table):
        assert get_level_table('reference').levels() == reference_table.levels()

    def test_cent_profile(self):
        table = get_level_table('cent')
        assert len(table) == 10
        assert table.first.balance_threshold == 10.0

    def test_unknown_profile_rejected(self):
        with pytest.raises(ConfigurationError):
            get_level_table('no_such_profile')

    def test_get_params_does_not_mutate_defaults(self):
        params = get_params('cent')
        params['lot_sizes'].append(100)
        assert len(PARAMS['lot_sizes']) == 20
        assert get_params()['base_balance'] == 100.0

    def test_unknown_profile_params_fall_back(self):
        assert get_params('unknown') == get_params()


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
