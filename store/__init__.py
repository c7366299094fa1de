"""
Scenario store - named configurations saved and reloaded by the app surfaces.
The engine never touches it.
"""

from .base import ScenarioRecord, ScenarioStore
from .json_file import JsonFileScenarioStore
from .memory import InMemoryScenarioStore

__all__ = [
    "ScenarioRecord",
    "ScenarioStore",
    "JsonFileScenarioStore",
    "InMemoryScenarioStore",
]
