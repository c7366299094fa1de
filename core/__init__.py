"""
Core package - configuration, result types, errors, and shared utilities.
No business logic lives here.
"""

from .config import (
    DEFAULT_CONFIG,
    EVENT_TYPES,
    INPUT_LIMITS,
    OneTimeEvent,
    SimulationConfig,
    add_event,
    new_event,
    remove_event,
    update_event,
)
from .errors import (
    CompoundProError,
    ConfigurationError,
    ScenarioStoreError,
    TargetYearError,
)
from .schema import MONTHLY_COLUMNS, YEARLY_COLUMNS, MonthlyDetail, YearlyResult
from .utils import annual_to_monthly_rate, round_half_up, to_units

__all__ = [
    "DEFAULT_CONFIG",
    "EVENT_TYPES",
    "INPUT_LIMITS",
    "OneTimeEvent",
    "SimulationConfig",
    "add_event",
    "new_event",
    "remove_event",
    "update_event",
    "CompoundProError",
    "ConfigurationError",
    "ScenarioStoreError",
    "TargetYearError",
    "MONTHLY_COLUMNS",
    "YEARLY_COLUMNS",
    "MonthlyDetail",
    "YearlyResult",
    "annual_to_monthly_rate",
    "round_half_up",
    "to_units",
]
