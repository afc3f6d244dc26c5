"""
Decision model — time-windowed modifiers layered on top of the base assumptions.
"""

from .base import Decision, DecisionImpact, DecisionType
from .impact import ImpactState, apply_decision_impact, fold_decisions

__all__ = [
    "Decision",
    "DecisionImpact",
    "DecisionType",
    "ImpactState",
    "apply_decision_impact",
    "fold_decisions",
]
