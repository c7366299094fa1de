"""
Monthly detail simulator - month-level reconstruction of a single year.

Nothing is cached between calls: prior years are replayed from the initial
principal on every request (at most years_to_grow * 12 steps), then the target
year is emitted month by month. The next month always compounds off the
unrounded, clamped end balance; rounding is for display only.
"""

from __future__ import annotations

from typing import List

from core.config import SimulationConfig
from core.errors import TargetYearError
from core.schema import MonthlyDetail
from core.utils import to_units

from .steps import run_year


def simulate_month(config: SimulationConfig, target_year: int) -> List[MonthlyDetail]:
    """Return the 12 MonthlyDetail rows for `target_year` (1-based)."""
    if not 1 <= target_year <= config.years_to_grow:
        raise TargetYearError(target_year, config.years_to_grow)

    balance = float(config.initial_principal)
    # invested is carried by run_year but irrelevant for the drill-down
    invested = balance

    for year in range(1, target_year):
        balance, invested, _ = run_year(config, balance, invested, year)

    _, _, steps = run_year(config, balance, invested, target_year)

    return [
        MonthlyDetail(
            month=month,
            start_balance=to_units(step.start_balance),
            interest=to_units(step.interest),
            contribution=step.cash_flow,
            end_balance=to_units(step.end_balance),
        )
        for month, step in enumerate(steps, start=1)
    ]
