"""
Projection runner - the entry point consumers call on every configuration change.

Validates at the boundary (optional), runs the annual simulator, and attaches
a summary. Results are memoized on the configuration value: SimulationConfig
is frozen and hashable, so an unchanged form never triggers a recompute.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import List, Tuple

from core.config import SimulationConfig
from core.schema import MonthlyDetail, YearlyResult
from data_prep.validators import ensure_valid
from reports.summary import ProjectionSummary, summarize

from .annual import simulate_annual
from .monthly import simulate_month

logger = logging.getLogger(__name__)

CACHE_SIZE = 64


@dataclass(frozen=True)
class ProjectionResult:
    config: SimulationConfig
    yearly: List[YearlyResult]
    summary: ProjectionSummary

    @property
    def final(self) -> YearlyResult:
        return self.yearly[-1]


@lru_cache(maxsize=CACHE_SIZE)
def _cached_annual(config: SimulationConfig) -> Tuple[YearlyResult, ...]:
    logger.debug("Simulating %d years (cache miss)", config.years_to_grow)
    return tuple(simulate_annual(config))


def run_projection(config: SimulationConfig, *, validate: bool = True) -> ProjectionResult:
    """
    Simulate `config` and summarize it.

    Parameters
    ----------
    config : SimulationConfig
        The plan to project.
    validate : bool
        If True (default), raise ConfigurationError for an invalid config
        before touching the engine.
    """
    if validate:
        ensure_valid(config)

    # fresh list per call so callers can't mutate the cached rows
    yearly = list(_cached_annual(config))
    summary = summarize(config, yearly)
    for flag in summary.flags:
        logger.info("Projection flag: %s", flag)

    return ProjectionResult(config=config, yearly=yearly, summary=summary)


def run_month_detail(
    config: SimulationConfig,
    target_year: int,
    *,
    validate: bool = True,
) -> List[MonthlyDetail]:
    """Drill-down for one year; raises TargetYearError outside [1, years_to_grow]."""
    if validate:
        ensure_valid(config)
    return simulate_month(config, target_year)


def clear_cache() -> None:
    _cached_annual.cache_clear()
