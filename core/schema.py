from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

# Column order of the tabular views built in reports/tables.py.
YEARLY_COLUMNS: Tuple[str, ...] = (
    "year",
    "age",
    "total_assets",
    "total_invested",
    "interest_earned_yearly",
    "purchasing_power",
    "is_retirement",
)

MONTHLY_COLUMNS: Tuple[str, ...] = (
    "month",
    "start_balance",
    "interest",
    "contribution",
    "end_balance",
)


@dataclass(frozen=True)
class YearlyResult:
    """
    Snapshot at the end of `year`. Currency fields are whole units for year >= 1;
    year 0 carries the initial principal as given.
    """
    year: int
    age: int
    total_assets: float
    total_invested: float
    interest_earned_yearly: float
    purchasing_power: Optional[float]
    is_retirement: bool


@dataclass(frozen=True)
class MonthlyDetail:
    """One month of a drill-down. `contribution` is negative while withdrawing."""
    month: int
    start_balance: int
    interest: int
    contribution: float
    end_balance: int
