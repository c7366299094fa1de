from __future__ import annotations

import os
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
DATA_DIR = PROJECT_ROOT / "data"

STORE_ENV_VAR = "COMPOUND_PRO_STORE"
DEFAULT_STORE_PATH = DATA_DIR / "scenarios.json"


def store_path() -> Path:
    """Scenario file location; $COMPOUND_PRO_STORE overrides the default."""
    override = os.environ.get(STORE_ENV_VAR)
    return Path(override) if override else DEFAULT_STORE_PATH
