"""
Numeric coercion shared by the engine and the snapshot boundary.

Anything that is not a finite real number becomes the default (0.0),
so tier and percentage calculations never see NaN or infinity. Finite
numbers beyond float range saturate at the largest float.
"""

import numbers
import sys
from decimal import Decimal

import numpy as np


def safe_float(value, default: float = 0.0) -> float:
    """Convert value to a finite float, falling back to default."""
    if value is None or isinstance(value, (bool, np.bool_)):
        return default

    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return default

    if not isinstance(value, (numbers.Real, np.number, Decimal)):
        return default

    try:
        result = float(value)
    except (TypeError, ValueError):
        return default
    except OverflowError:
        return _saturate(value)

    if not np.isfinite(result):
        if isinstance(value, Decimal) and value.is_finite():
            return _saturate(value)
        return default

    return result


def _saturate(value) -> float:
    return sys.float_info.max if value > 0 else -sys.float_info.max


def safe_int(value, default: int = 0) -> int:
    """Convert value to a non-negative int count."""
    return max(0, int(safe_float(value, default)))


def clamp_pct(value: float) -> float:
    """Clip a percentage into [0, 100]."""
    return float(np.clip(safe_float(value), 0.0, 100.0))
