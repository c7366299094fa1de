"""
Static trajectory chart (PNG/SVG/PDF) for the CLI. The dashboard draws its
own interactive version with Altair.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence, Union

from matplotlib.figure import Figure
from matplotlib.ticker import FuncFormatter

from core.schema import YearlyResult

from .formatting import format_compact
from .tables import yearly_frame


def build_trajectory_figure(
    results: Sequence[YearlyResult],
    *,
    retirement_year: Optional[int] = None,
    title: str = "Asset Trajectory",
) -> Figure:
    df = yearly_frame(results)

    fig = Figure(figsize=(9, 4.5))
    ax = fig.subplots()
    ax.fill_between(df["year"], df["total_assets"], alpha=0.25, label="_nolegend_")
    ax.plot(df["year"], df["total_assets"], linewidth=2, label="Total assets")
    ax.plot(df["year"], df["total_invested"], linestyle="--", label="Total invested")
    if df["purchasing_power"].notna().any():
        ax.plot(df["year"], df["purchasing_power"], linestyle=":", label="Purchasing power")

    if retirement_year is not None and retirement_year < int(df["year"].max()):
        ax.axvline(retirement_year, color="firebrick", linewidth=1, alpha=0.7)
        ax.annotate("Withdrawals start", xy=(retirement_year, ax.get_ylim()[1]),
                    xytext=(4, -12), textcoords="offset points", fontsize=8, color="firebrick")

    ax.yaxis.set_major_formatter(FuncFormatter(lambda v, _: format_compact(v)))
    ax.set_xlabel("Year")
    ax.set_ylabel("Balance")
    ax.set_title(title)
    ax.grid(alpha=0.3)
    ax.legend(loc="upper left")
    fig.tight_layout()
    return fig


def save_trajectory_chart(
    results: Sequence[YearlyResult],
    path: Union[str, Path],
    *,
    retirement_year: Optional[int] = None,
) -> Path:
    path = Path(path)
    fig = build_trajectory_figure(results, retirement_year=retirement_year)
    fig.savefig(path, dpi=120)
    return path
