"""
Annual simulator - one YearlyResult per year from 0 through the horizon.

Running balances stay unrounded across years; rounding to whole units happens
only when a row is emitted, so rounding error never compounds.
"""

from __future__ import annotations

from typing import List

from core.config import SimulationConfig
from core.schema import YearlyResult
from core.utils import discount_factor, to_units

from .steps import is_retired, run_year


def simulate_annual(config: SimulationConfig) -> List[YearlyResult]:
    """
    Simulate `config.years_to_grow` years of monthly compounding.

    Parameters
    ----------
    config : SimulationConfig
        Complete plan. Not validated here - callers guarantee years_to_grow >= 1.

    Returns
    -------
    List of years_to_grow + 1 rows ordered by year, starting with the
    synthetic year-0 snapshot.
    """
    balance = float(config.initial_principal)
    invested = float(config.initial_principal)

    results: List[YearlyResult] = [
        YearlyResult(
            year=0,
            age=config.start_age,
            total_assets=config.initial_principal,
            total_invested=config.initial_principal,
            interest_earned_yearly=0,
            purchasing_power=config.initial_principal,
            is_retirement=False,
        )
    ]

    for year in range(1, config.years_to_grow + 1):
        balance, invested, steps = run_year(config, balance, invested, year)
        yearly_interest = sum(s.interest for s in steps)

        real_value = to_units(balance / discount_factor(config.inflation_rate, year))

        results.append(
            YearlyResult(
                year=year,
                age=config.start_age + year,
                total_assets=to_units(balance),
                total_invested=to_units(invested),
                interest_earned_yearly=to_units(yearly_interest),
                purchasing_power=real_value,
                is_retirement=is_retired(config, year),
            )
        )

    return results
