# config/money_management.py
"""
Progressive lot-sizing policy for the XAUUSD account.

Each level's balance threshold is the previous one times the growth
factor. Targets are fixed percentages of the level threshold, not of the
live balance.

The default profile uses the shipped reference table in
core/level_table.py. Named profiles generate a table from these
parameters instead.
"""

PARAMS = {
    # Level 1 threshold and per-level growth
    'base_balance': 100.0,
    'growth_factor': 1.5,

    # One entry per level; never decreasing
    'lot_sizes': [
        0.01, 0.01, 0.02, 0.03, 0.05,
        0.08, 0.12, 0.2, 0.3, 0.5,
        0.8, 1.3, 2, 3, 5,
        8, 13, 20, 30, 50,
    ],

    # Profit targets as % of the level threshold
    'daily_target_pct': 3.0,
    'weekly_target_pct': 15.0,
    'monthly_target_pct': 60.0,

    # Tier lookup key: balance (False) or equity (True)
    'use_equity': False,

    # Second gate: no new trade while this many positions are open
    'max_open_positions': 1,
}


PROFILE_OVERRIDES = {
    'conservative': {
        'growth_factor': 2.0,
        'daily_target_pct': 2.0,
        'weekly_target_pct': 10.0,
        'monthly_target_pct': 40.0,
    },
    'cent': {
        'base_balance': 10.0,
        'lot_sizes': [
            0.01, 0.01, 0.01, 0.02, 0.02,
            0.03, 0.05, 0.08, 0.12, 0.2,
        ],
    },
}


def get_params(profile: str = None) -> dict:
    """Get money management parameters, with optional profile overrides."""
    params = PARAMS.copy()

    if profile:
        key = profile.lower()
        if key in PROFILE_OVERRIDES:
            params.update(PROFILE_OVERRIDES[key])

    params['lot_sizes'] = list(params['lot_sizes'])
    return params
