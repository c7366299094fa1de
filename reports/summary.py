"""
Projection summary - headline numbers and warning flags for one projection.

Answers the questions the dashboard cards ask:
  Q1: "What will I have?"           → final assets, in nominal and today's money
  Q2: "How much of it did I put in?" → total invested vs. interest earned
  Q3: "Does the money last?"        → depletion year during withdrawals
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

import pandas as pd

from core.config import SimulationConfig
from core.schema import YearlyResult

from .formatting import format_currency


@dataclass
class ProjectionSummary:
    """Structured summary of a yearly projection."""
    years: int
    final_age: int

    final_assets: float
    total_invested: float
    total_interest: float  # final assets - total invested
    final_purchasing_power: Optional[float]

    peak_assets: float
    peak_year: int

    depletion_year: Optional[int]  # first withdrawal year ending at zero
    depletion_age: Optional[int]

    flags: List[str] = field(default_factory=list)

    def to_dataframe(self) -> pd.DataFrame:
        """Convert to a display-friendly table."""
        rows = [
            {"Metric": "Horizon", "Value": f"{self.years}", "Unit": "years"},
            {"Metric": "Final Age", "Value": f"{self.final_age}", "Unit": "years"},
            {"Metric": "Final Assets", "Value": format_currency(self.final_assets), "Unit": ""},
            {"Metric": "Total Invested", "Value": format_currency(self.total_invested), "Unit": ""},
            {"Metric": "Total Interest", "Value": format_currency(self.total_interest), "Unit": ""},
            {"Metric": "Peak Assets", "Value": format_currency(self.peak_assets), "Unit": f"year {self.peak_year}"},
        ]
        if self.final_purchasing_power is not None:
            rows.insert(3, {
                "Metric": "Purchasing Power",
                "Value": format_currency(self.final_purchasing_power),
                "Unit": "today's money",
            })
        if self.depletion_year is not None:
            rows.append({
                "Metric": "Depleted",
                "Value": f"year {self.depletion_year}",
                "Unit": f"age {self.depletion_age}",
            })
        if self.flags:
            rows.append({"Metric": "FLAGS", "Value": " | ".join(self.flags), "Unit": ""})
        return pd.DataFrame(rows)


def _overdrawn_events(config: SimulationConfig, results: Sequence[YearlyResult]) -> List[str]:
    """Withdrawal events larger than what the account holds at the start of their year."""
    names = []
    horizon = len(results) - 1
    for year in range(1, horizon + 1):
        available = float(results[year - 1].total_assets)
        for e in config.events_for_year(year):
            if e.type == "deposit":
                available += e.amount
                continue
            if e.amount > available:
                names.append(e.name or e.id)
            available -= e.amount
    return names


def summarize(config: SimulationConfig, results: Sequence[YearlyResult]) -> ProjectionSummary:
    """
    Build a ProjectionSummary from annual simulator output.

    Parameters
    ----------
    config : SimulationConfig
        The config that produced `results`.
    results : sequence of YearlyResult
        Output of engine.annual.simulate_annual(), year 0 first.
    """
    if len(results) == 0:
        raise ValueError("No yearly results to summarize.")

    final = results[-1]
    peak = max(results, key=lambda r: r.total_assets)

    depleted = next(
        (r for r in results if r.is_retirement and r.total_assets <= 0),
        None,
    )

    flags = []
    if depleted is not None:
        flags.append(f"DEPLETED: balance reaches zero in year {depleted.year} (age {depleted.age})")
    overdrawn = _overdrawn_events(config, results)
    if overdrawn:
        flags.append(f"EVENT_OVERDRAW: withdrawal exceeds balance for {', '.join(overdrawn)}")
    if (
        final.purchasing_power is not None
        and config.initial_principal > 0
        and final.purchasing_power < config.initial_principal
    ):
        flags.append("REAL_VALUE_DECLINE: purchasing power ends below the initial principal")

    return ProjectionSummary(
        years=final.year,
        final_age=final.age,
        final_assets=final.total_assets,
        total_invested=final.total_invested,
        total_interest=final.total_assets - final.total_invested,
        final_purchasing_power=final.purchasing_power,
        peak_assets=peak.total_assets,
        peak_year=peak.year,
        depletion_year=depleted.year if depleted is not None else None,
        depletion_age=depleted.age if depleted is not None else None,
        flags=flags,
    )
