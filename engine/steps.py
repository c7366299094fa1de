"""
Shared building blocks for both simulators.

The annual simulator and the monthly drill-down must agree to the cent, so
neither reimplements the economics: event injection and the per-month update
live here and nowhere else.

Month update (order matters for floating point parity):
  1. interest = balance * monthly_rate
  2. balance  = balance + interest + cash_flow
  3. balance  = max(balance, 0)       -- overdraws are truncated, not reported
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple

from core.config import OneTimeEvent, SimulationConfig


@dataclass(frozen=True)
class MonthStep:
    """Result of one monthly update."""
    start_balance: float
    interest: float
    cash_flow: float
    end_balance: float


def is_retired(config: SimulationConfig, year: int) -> bool:
    """Withdrawal phase starts strictly after retirement_year."""
    return year > config.retirement_year


def monthly_cash_flow(config: SimulationConfig, retired: bool) -> float:
    """Signed cash movement for every month of a year in the given phase."""
    if retired:
        return -config.monthly_withdrawal
    return config.monthly_contribution


def apply_year_events(
    balance: float,
    invested: float,
    events: Iterable[OneTimeEvent],
    year: int,
) -> Tuple[float, float]:
    """
    Apply every event scheduled for `year`, in collection order.

    Deposits raise both the balance and contributed principal; withdrawals
    only lower the balance. No clamping here; the month update floors it.
    """
    for e in events:
        if e.year != year:
            continue
        if e.type == "deposit":
            balance += e.amount
            invested += e.amount
        else:
            balance -= e.amount
    return balance, invested


def apply_month(balance: float, monthly_rate: float, cash_flow: float) -> MonthStep:
    interest = balance * monthly_rate
    end = balance + interest + cash_flow
    if end < 0:
        end = 0.0
    return MonthStep(
        start_balance=balance,
        interest=interest,
        cash_flow=cash_flow,
        end_balance=end,
    )


def run_year(config: SimulationConfig, balance: float, invested: float, year: int):
    """
    Advance one full year: events first, then 12 month updates.

    Returns (balance, invested, steps) where steps holds the 12 MonthStep
    records; callers pick what they need from them.
    """
    balance, invested = apply_year_events(balance, invested, config.one_time_events, year)

    retired = is_retired(config, year)
    cash_flow = monthly_cash_flow(config, retired)
    rate = config.monthly_rate

    steps = []
    for _ in range(12):
        step = apply_month(balance, rate, cash_flow)
        steps.append(step)
        balance = step.end_balance
        if not retired:
            invested += config.monthly_contribution
    return balance, invested, steps
