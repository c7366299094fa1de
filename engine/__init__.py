"""
Simulation engine - shared monthly steps, annual simulator, monthly drill-down,
and the memoizing projection runner.
"""

from .annual import simulate_annual
from .monthly import simulate_month
from .runner import ProjectionResult, run_month_detail, run_projection
from .steps import apply_month, apply_year_events

__all__ = [
    "simulate_annual",
    "simulate_month",
    "ProjectionResult",
    "run_projection",
    "run_month_detail",
    "apply_month",
    "apply_year_events",
]
