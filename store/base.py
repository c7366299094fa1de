"""
Base classes for scenario persistence.
Just the interface and the record type; backends live in memory.py / json_file.py.
"""

from __future__ import annotations

import datetime as dt
import uuid
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from core.config import SimulationConfig
from core.errors import ScenarioStoreError
from data_prep.loader import config_from_dict, config_to_dict


class ScenarioRecord(BaseModel):
    """A named, saved configuration: {id, name, date, data}."""

    id: str
    name: str
    date: str = Field(default_factory=lambda: dt.date.today().isoformat())
    data: Dict[str, Any]

    def config(self) -> SimulationConfig:
        return config_from_dict(self.data)


def new_scenario_id() -> str:
    return uuid.uuid4().hex


def build_record(
    name: str,
    config: SimulationConfig,
    *,
    scenario_id: Optional[str] = None,
) -> ScenarioRecord:
    name = (name or "").strip()
    if not name:
        raise ScenarioStoreError("Scenario name must not be empty.")
    return ScenarioRecord(
        id=scenario_id or new_scenario_id(),
        name=name,
        data=config_to_dict(config),
    )


class ScenarioStore:
    """Interface for named-scenario storage: list, add, remove (+ get)."""

    def list(self) -> List[ScenarioRecord]:
        raise NotImplementedError

    def add(
        self,
        name: str,
        config: SimulationConfig,
        *,
        scenario_id: Optional[str] = None,
    ) -> ScenarioRecord:
        raise NotImplementedError

    def remove(self, scenario_id: str) -> bool:
        raise NotImplementedError

    def get(self, scenario_id: str) -> Optional[ScenarioRecord]:
        return next((r for r in self.list() if r.id == scenario_id), None)
