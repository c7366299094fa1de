"""
Simulation configuration - the immutable input handed to the engine on every call.

Amounts are plain currency units, rates are percentages (6.0 means 6%).
The engine never mutates a config; the event helpers at the bottom of this
module return new instances.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field, replace
from typing import Dict, Literal, Optional, Tuple

from .utils import annual_to_monthly_rate

EventType = Literal["deposit", "withdrawal"]
EVENT_TYPES: Tuple[str, ...] = ("deposit", "withdrawal")


@dataclass(frozen=True)
class OneTimeEvent:
    """A lump-sum cash movement applied at the start of `year`."""
    id: str
    year: int
    amount: float
    type: EventType = "deposit"
    name: str = ""


@dataclass(frozen=True)
class SimulationConfig:
    initial_principal: float = 100_000.0
    monthly_contribution: float = 10_000.0
    annual_rate: float = 6.0          # percent, nominal
    years_to_grow: int = 30
    start_age: int = 25

    # contributions stop and withdrawals start once year > retirement_year
    retirement_year: int = 30
    monthly_withdrawal: float = 0.0

    one_time_events: Tuple[OneTimeEvent, ...] = field(default_factory=tuple)

    # only used for the purchasing-power column
    inflation_rate: float = 0.0

    def __post_init__(self) -> None:
        # keep the config hashable so the runner can memoize on it
        if not isinstance(self.one_time_events, tuple):
            object.__setattr__(self, "one_time_events", tuple(self.one_time_events))

    @property
    def monthly_rate(self) -> float:
        """Nominal monthly rate: annual_rate / 100 / 12 (simple division, not (1+r)^(1/12)-1)."""
        return annual_to_monthly_rate(self.annual_rate)

    def events_for_year(self, year: int) -> Tuple[OneTimeEvent, ...]:
        return tuple(e for e in self.one_time_events if e.year == year)


DEFAULT_CONFIG = SimulationConfig()

# Ranges offered by the input form. Values outside them are allowed but flagged.
INPUT_LIMITS: Dict[str, Tuple[float, float]] = {
    "initial_principal": (0, 20_000_000),
    "monthly_contribution": (0, 1_000_000),
    "annual_rate": (0, 20),
    "start_age": (0, 80),
    "years_to_grow": (1, 100),
    "monthly_withdrawal": (0, 500_000),
    "event_amount": (0, 2_000_000),
}

DEFAULT_EVENT_AMOUNT = 100_000.0


# ---------------------------------------------------------------------------
# Event editing
# ---------------------------------------------------------------------------
def new_event(
    config: SimulationConfig,
    *,
    year: Optional[int] = None,
    amount: float = DEFAULT_EVENT_AMOUNT,
    type: EventType = "deposit",
    name: Optional[str] = None,
) -> OneTimeEvent:
    """
    Build an event with the form's defaults: mid-horizon year, 100k deposit,
    and a numbered label. Ids are random so rapid successive adds never collide.
    """
    if year is None:
        # half-up, so a 5-year horizon lands on year 3
        year = max(int(config.years_to_grow / 2 + 0.5), 1)
    if name is None:
        name = f"Lump sum {len(config.one_time_events) + 1}"
    return OneTimeEvent(id=uuid.uuid4().hex, year=int(year), amount=float(amount), type=type, name=name)


def add_event(config: SimulationConfig, event: OneTimeEvent) -> SimulationConfig:
    return replace(config, one_time_events=config.one_time_events + (event,))


def update_event(config: SimulationConfig, event_id: str, **changes) -> SimulationConfig:
    events = tuple(
        replace(e, **changes) if e.id == event_id else e
        for e in config.one_time_events
    )
    return replace(config, one_time_events=events)


def remove_event(config: SimulationConfig, event_id: str) -> SimulationConfig:
    events = tuple(e for e in config.one_time_events if e.id != event_id)
    return replace(config, one_time_events=events)
