"""
Boundary validation for simulation configs before they reach the engine.

The simulators accept anything and do the arithmetic; this module is where
bad input is caught:
- Negative amounts
- Horizon / retirement year / event years out of range
- Unknown event types, non-finite numbers
- Values outside the form's usual ranges (warnings only)
"""

from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass, field
from typing import List

from core.config import EVENT_TYPES, INPUT_LIMITS, SimulationConfig
from core.errors import ConfigurationError


@dataclass
class ValidationResult:
    """Collects all validation warnings/errors for a config."""
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def summary(self) -> str:
        lines = []
        if self.errors:
            lines.append(f"ERRORS ({len(self.errors)}):")
            for e in self.errors:
                lines.append(f"  ✗ {e}")
        if self.warnings:
            lines.append(f"WARNINGS ({len(self.warnings)}):")
            for w in self.warnings:
                lines.append(f"  ⚠ {w}")
        if not lines:
            lines.append("✓ All checks passed.")
        return "\n".join(lines)


_NUMERIC_FIELDS = (
    "initial_principal",
    "monthly_contribution",
    "annual_rate",
    "years_to_grow",
    "start_age",
    "retirement_year",
    "monthly_withdrawal",
    "inflation_rate",
)


def _check_limit(result: ValidationResult, name: str, value: float) -> None:
    lo, hi = INPUT_LIMITS[name]
    if value < lo or value > hi:
        result.warnings.append(f"{name}={value:g} is outside the usual range [{lo:g}, {hi:g}].")


def validate_config(config: SimulationConfig) -> ValidationResult:
    """
    Run all checks on a config.
    Returns a ValidationResult with errors (blocking) and warnings (informational).
    """
    result = ValidationResult()

    # --- Finite numbers ---
    non_finite = [
        name for name in _NUMERIC_FIELDS
        if not math.isfinite(float(getattr(config, name)))
    ]
    if non_finite:
        result.errors.append(f"Non-finite values for: {non_finite}")
        return result  # range checks are meaningless on NaN/inf

    # --- Amounts ---
    for name in ("initial_principal", "monthly_contribution", "monthly_withdrawal"):
        value = getattr(config, name)
        if value < 0:
            result.errors.append(f"{name} must be non-negative, got {value:g}.")
        else:
            _check_limit(result, name, value)

    # --- Rates ---
    if config.annual_rate < 0:
        result.warnings.append(f"annual_rate is negative ({config.annual_rate:g}%).")
    else:
        _check_limit(result, "annual_rate", config.annual_rate)
    if config.inflation_rate <= -100:
        result.errors.append(
            f"inflation_rate must be greater than -100, got {config.inflation_rate:g}."
        )
    elif config.inflation_rate < 0:
        result.warnings.append(f"inflation_rate is negative ({config.inflation_rate:g}%).")

    # --- Horizon ---
    if config.years_to_grow < 1:
        result.errors.append(f"years_to_grow must be >= 1, got {config.years_to_grow}.")
        return result  # year-range checks below depend on a valid horizon
    _check_limit(result, "years_to_grow", config.years_to_grow)

    if config.start_age < 0:
        result.errors.append(f"start_age must be non-negative, got {config.start_age}.")
    else:
        _check_limit(result, "start_age", config.start_age)

    if not 1 <= config.retirement_year <= config.years_to_grow:
        result.errors.append(
            f"retirement_year must be in [1, {config.years_to_grow}], got {config.retirement_year}."
        )

    # --- Events ---
    for e in config.one_time_events:
        label = e.name or e.id
        if e.type not in EVENT_TYPES:
            result.errors.append(f"Event '{label}' has unknown type '{e.type}'.")
        if not math.isfinite(float(e.amount)):
            result.errors.append(f"Event '{label}' has a non-finite amount.")
        elif e.amount < 0:
            result.errors.append(f"Event '{label}' has negative amount {e.amount:g}.")
        else:
            _check_limit(result, "event_amount", e.amount)
        if not 1 <= e.year <= config.years_to_grow:
            result.errors.append(
                f"Event '{label}' year {e.year} is outside [1, {config.years_to_grow}]."
            )

    dup = [i for i, n in Counter(e.id for e in config.one_time_events).items() if n > 1]
    if dup:
        result.warnings.append(f"{len(dup)} duplicate event ids found: {dup}")

    return result


def ensure_valid(config: SimulationConfig) -> ValidationResult:
    """Validate and raise ConfigurationError if anything blocking was found."""
    result = validate_config(config)
    if not result.is_valid:
        raise ConfigurationError(result)
    return result
