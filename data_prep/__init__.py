"""
Data preparation - loading configs from dicts/JSON and validating them.
"""

from .loader import (
    canonicalize_keys,
    config_from_dict,
    config_to_dict,
    load_config_json,
    save_config_json,
)
from .validators import ValidationResult, ensure_valid, validate_config

__all__ = [
    "canonicalize_keys",
    "config_from_dict",
    "config_to_dict",
    "load_config_json",
    "save_config_json",
    "ValidationResult",
    "ensure_valid",
    "validate_config",
]
