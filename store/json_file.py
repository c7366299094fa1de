"""
JSON-file scenario store, the on-disk counterpart of the web front end's
`compound_scenarios` localStorage key.

The file holds a single JSON array of records. Every mutation reads the
current file and rewrites it whole: last write wins, no locking.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, Optional, Union

from pydantic import TypeAdapter, ValidationError

from core.config import SimulationConfig
from core.errors import ScenarioStoreError

from .base import ScenarioRecord, ScenarioStore, build_record

logger = logging.getLogger(__name__)

_RECORDS = TypeAdapter(List[ScenarioRecord])


class JsonFileScenarioStore(ScenarioStore):

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def _read(self) -> List[ScenarioRecord]:
        if not self.path.exists():
            return []
        text = self.path.read_text(encoding="utf-8")
        if not text.strip():
            return []
        try:
            return _RECORDS.validate_json(text)
        except ValidationError as exc:
            raise ScenarioStoreError(f"Corrupt scenario file {self.path}: {exc}") from exc

    def _write(self, records: List[ScenarioRecord]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = [r.model_dump() for r in records]
        self.path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")

    def list(self) -> List[ScenarioRecord]:
        return self._read()

    def add(
        self,
        name: str,
        config: SimulationConfig,
        *,
        scenario_id: Optional[str] = None,
    ) -> ScenarioRecord:
        records = self._read()
        record = build_record(name, config, scenario_id=scenario_id)
        if any(r.id == record.id for r in records):
            raise ScenarioStoreError(f"Scenario id {record.id!r} already exists.")
        records.append(record)
        self._write(records)
        logger.info("Saved scenario %r (%s) to %s", record.name, record.id, self.path)
        return record

    def remove(self, scenario_id: str) -> bool:
        records = self._read()
        kept = [r for r in records if r.id != scenario_id]
        if len(kept) == len(records):
            return False
        self._write(kept)
        logger.info("Deleted scenario %s from %s", scenario_id, self.path)
        return True
