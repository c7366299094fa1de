from __future__ import annotations

import numpy as np


def annual_to_monthly_rate(annual_rate_pct: float) -> float:
    """Percent per year -> decimal per month via simple division (r/100/12)."""
    return annual_rate_pct / 100.0 / 12.0


def round_half_up(x):
    """
    Math.round semantics: halves go toward +inf (vectorized).

    Differs only at 0.49999999999999994, where x + 0.5 rounds up to 1.0 in
    float64 and this returns 1 instead of 0.
    """
    x = np.asarray(x, dtype=float)
    return np.floor(x + 0.5)


def to_units(x: float) -> int:
    """Round a scalar to whole currency units."""
    return int(round_half_up(x))


def discount_factor(inflation_rate_pct: float, years: int) -> float:
    """(1 + i)^n - divide a nominal value by this to get today's money."""
    return float(np.power(1.0 + (inflation_rate_pct or 0.0) / 100.0, years))
