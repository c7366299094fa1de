"""
Display formatting. Presentation only; the engine works on plain numbers.
"""

from __future__ import annotations

from core.utils import to_units

CURRENCY_PREFIX = "NT$"

_COMPACT_STEPS = (
    (1e12, "T"),
    (1e9, "B"),
    (1e6, "M"),
    (1e3, "K"),
)


def format_currency(value: float, *, prefix: str = CURRENCY_PREFIX) -> str:
    """Whole units with thousands separators, e.g. NT$1,234,567 / -NT$500."""
    units = to_units(value)
    sign = "-" if units < 0 else ""
    return f"{sign}{prefix}{abs(units):,}"


def format_compact(value: float) -> str:
    """Short axis label: 1.2M, 350K, 999. At most one decimal, trailing .0 dropped."""
    magnitude = abs(value)
    for threshold, suffix in _COMPACT_STEPS:
        if magnitude >= threshold:
            text = f"{value / threshold:.1f}".rstrip("0").rstrip(".")
            return f"{text}{suffix}"
    text = f"{value:.1f}".rstrip("0").rstrip(".")
    return text
