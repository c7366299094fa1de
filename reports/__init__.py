"""
Report outputs - tables, summary metrics/flags, and display formatting.
"""

from .formatting import format_compact, format_currency
from .summary import ProjectionSummary, summarize
from .tables import age_table, monthly_frame, trajectory_long, yearly_frame

__all__ = [
    "format_compact",
    "format_currency",
    "ProjectionSummary",
    "summarize",
    "age_table",
    "monthly_frame",
    "trajectory_long",
    "yearly_frame",
]
