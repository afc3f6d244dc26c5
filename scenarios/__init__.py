"""
Scenarios — named presets of assumption overrides and suggested decisions.
"""

from .presets import (
    PREDEFINED_SCENARIOS,
    Scenario,
    apply_scenario,
    build_scenario_path,
    get_scenario,
    list_scenarios,
)

__all__ = [
    "PREDEFINED_SCENARIOS",
    "Scenario",
    "apply_scenario",
    "build_scenario_path",
    "get_scenario",
    "list_scenarios",
]
