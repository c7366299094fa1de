"""
Tabular views of engine output for the CLI and the dashboard.
"""

from __future__ import annotations

from dataclasses import asdict
from typing import Sequence

import numpy as np
import pandas as pd

from core.schema import MONTHLY_COLUMNS, YEARLY_COLUMNS, MonthlyDetail, YearlyResult

PHASE_LABELS = {False: "Accumulation", True: "Withdrawal"}


def yearly_frame(results: Sequence[YearlyResult]) -> pd.DataFrame:
    """One row per year, columns in YEARLY_COLUMNS order."""
    df = pd.DataFrame([asdict(r) for r in results], columns=list(YEARLY_COLUMNS))
    df["is_retirement"] = df["is_retirement"].astype(bool)
    return df


def monthly_frame(details: Sequence[MonthlyDetail]) -> pd.DataFrame:
    """Drill-down table for one year, columns in MONTHLY_COLUMNS order."""
    return pd.DataFrame([asdict(d) for d in details], columns=list(MONTHLY_COLUMNS))


def age_table(results: Sequence[YearlyResult]) -> pd.DataFrame:
    """
    Age-indexed view: year 0 dropped, phase label added.

    Columns: age, year, total_invested, interest_earned_yearly, total_assets,
    purchasing_power, phase.
    """
    df = yearly_frame(results)
    df = df[df["year"] > 0].copy()
    df["phase"] = df["is_retirement"].map(PHASE_LABELS)
    cols = [
        "age", "year", "total_invested", "interest_earned_yearly",
        "total_assets", "purchasing_power", "phase",
    ]
    return df[cols].reset_index(drop=True)


def trajectory_long(results: Sequence[YearlyResult]) -> pd.DataFrame:
    """
    Melt the yearly frame into (year, age, series, value) rows for charting
    assets, invested principal and purchasing power on one axis.
    """
    df = yearly_frame(results)
    series = {
        "total_assets": "Total assets",
        "total_invested": "Total invested",
        "purchasing_power": "Purchasing power",
    }
    long = df.melt(
        id_vars=["year", "age"],
        value_vars=list(series),
        var_name="series",
        value_name="value",
    )
    long["series"] = long["series"].map(series)
    long["value"] = long["value"].astype(float)
    return long.dropna(subset=["value"]).reset_index(drop=True)


def monthly_interest_total(details: Sequence[MonthlyDetail]) -> float:
    """Sum of the (rounded) monthly interest postings."""
    return float(np.sum([d.interest for d in details]))
