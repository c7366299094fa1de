"""
Exception hierarchy. The simulators themselves never raise for well-formed
input; these are raised at the boundaries (validation, drill-down, storage).
"""

from __future__ import annotations


class CompoundProError(Exception):
    """Base class for all domain errors."""


class ConfigurationError(CompoundProError, ValueError):
    """
    A configuration violates one or more constraints.

    Built either from a ValidationResult (every violated constraint is listed)
    or from a single message when the input could not be parsed at all.
    """

    def __init__(self, result):
        if isinstance(result, str):
            self.result = None
            self.errors = [result]
            super().__init__(f"Invalid configuration: {result}")
        else:
            self.result = result
            self.errors = list(result.errors)
            super().__init__("Invalid configuration:\n" + result.summary())


class TargetYearError(CompoundProError, ValueError):
    """Monthly detail requested for a year outside [1, years_to_grow]."""

    def __init__(self, target_year: int, years_to_grow: int):
        self.target_year = target_year
        self.years_to_grow = years_to_grow
        super().__init__(
            f"target_year must be in [1, {years_to_grow}], got {target_year}"
        )


class ScenarioStoreError(CompoundProError):
    """Scenario store could not be read or the request was rejected."""
