"""
Load and save simulation configs as plain dicts / JSON files.

Accepts both snake_case keys and the camelCase keys used by the web front end
(initialPrincipal, oneTimeEvents, ...). Unknown keys are ignored;
missing keys fall back to DEFAULT_CONFIG, except inflation which defaults to 0.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, fields
from pathlib import Path
from typing import Any, Dict, Mapping, Union

from core.config import DEFAULT_CONFIG, OneTimeEvent, SimulationConfig
from core.errors import ConfigurationError

logger = logging.getLogger(__name__)

_KEY_ALIASES: Dict[str, str] = {
    "initialPrincipal": "initial_principal",
    "principal": "initial_principal",
    "monthlyContribution": "monthly_contribution",
    "annualRate": "annual_rate",
    "rate": "annual_rate",
    "yearsToGrow": "years_to_grow",
    "years": "years_to_grow",
    "startAge": "start_age",
    "retirementYear": "retirement_year",
    "monthlyWithdrawal": "monthly_withdrawal",
    "oneTimeEvents": "one_time_events",
    "events": "one_time_events",
    "inflationRate": "inflation_rate",
    "inflation": "inflation_rate",
}

_INT_FIELDS = {"years_to_grow", "start_age", "retirement_year"}
_FIELD_NAMES = {f.name for f in fields(SimulationConfig)}


def canonicalize_keys(data: Mapping[str, Any]) -> Dict[str, Any]:
    """Return a copy with aliased keys renamed; canonical keys win over aliases."""
    out: Dict[str, Any] = {}
    for key, value in data.items():
        canon = _KEY_ALIASES.get(key, key)
        if canon in out and key != canon:
            continue
        out[canon] = value
    return out


def _coerce(name: str, value: Any):
    try:
        if name in _INT_FIELDS:
            return int(value)
        return float(value)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"{name}: cannot interpret {value!r} as a number") from exc


def event_from_dict(data: Mapping[str, Any], index: int = 0) -> OneTimeEvent:
    try:
        return OneTimeEvent(
            id=str(data.get("id", f"event-{index + 1}")),
            year=int(data["year"]),
            amount=float(data["amount"]),
            type=str(data.get("type", "deposit")),
            name=str(data.get("name", "")),
        )
    except KeyError as exc:
        raise ConfigurationError(f"event #{index + 1} is missing {exc.args[0]!r}") from exc
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"event #{index + 1}: {exc}") from exc


def config_from_dict(data: Mapping[str, Any]) -> SimulationConfig:
    """Build a SimulationConfig from a mapping (snake_case or camelCase keys)."""
    canon = canonicalize_keys(data)

    ignored = sorted(k for k in canon if k not in _FIELD_NAMES)
    if ignored:
        logger.debug("Ignoring unknown config keys: %s", ignored)

    kwargs: Dict[str, Any] = {}
    for name in _FIELD_NAMES:
        if name not in canon or name == "one_time_events":
            continue
        value = canon[name]
        if value is None and name == "inflation_rate":
            value = 0.0
        kwargs[name] = _coerce(name, value)

    raw_events = canon.get("one_time_events") or []
    kwargs["one_time_events"] = tuple(
        event_from_dict(e, i) for i, e in enumerate(raw_events)
    )

    defaults = asdict(DEFAULT_CONFIG)
    defaults.pop("one_time_events")
    defaults["inflation_rate"] = 0.0
    defaults.update(kwargs)
    return SimulationConfig(**defaults)


def config_to_dict(config: SimulationConfig) -> Dict[str, Any]:
    out = asdict(config)
    out["one_time_events"] = [asdict(e) for e in config.one_time_events]
    return out


def load_config_json(path: Union[str, Path]) -> SimulationConfig:
    text = Path(path).read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"{path}: invalid JSON ({exc})") from exc
    if not isinstance(data, dict):
        raise ConfigurationError(f"{path}: expected a JSON object")
    return config_from_dict(data)


def save_config_json(config: SimulationConfig, path: Union[str, Path]) -> Path:
    path = Path(path)
    path.write_text(json.dumps(config_to_dict(config), indent=2), encoding="utf-8")
    return path
