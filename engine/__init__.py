"""
Projection engine — deterministic year-by-year net worth simulation.
"""

from .runner import FinancialSnapshot, ProjectionResult, project_path
from .path import Path, build_path, target_amount

__all__ = [
    "FinancialSnapshot",
    "ProjectionResult",
    "project_path",
    "Path",
    "build_path",
    "target_amount",
]
