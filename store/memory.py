from __future__ import annotations

import logging
from typing import List, Optional

from core.config import SimulationConfig
from core.errors import ScenarioStoreError

from .base import ScenarioRecord, ScenarioStore, build_record

logger = logging.getLogger(__name__)


class InMemoryScenarioStore(ScenarioStore):
    """Process-local store; handy for tests and single dashboard sessions."""

    def __init__(self, records: Optional[List[ScenarioRecord]] = None):
        self._records: List[ScenarioRecord] = list(records or [])

    def list(self) -> List[ScenarioRecord]:
        return list(self._records)

    def add(
        self,
        name: str,
        config: SimulationConfig,
        *,
        scenario_id: Optional[str] = None,
    ) -> ScenarioRecord:
        record = build_record(name, config, scenario_id=scenario_id)
        if any(r.id == record.id for r in self._records):
            raise ScenarioStoreError(f"Scenario id {record.id!r} already exists.")
        self._records.append(record)
        logger.info("Saved scenario %r (%s)", record.name, record.id)
        return record

    def remove(self, scenario_id: str) -> bool:
        before = len(self._records)
        self._records = [r for r in self._records if r.id != scenario_id]
        removed = len(self._records) < before
        if removed:
            logger.info("Deleted scenario %s", scenario_id)
        return removed
