"""
Path score — one comparable number per projection, lower is better.

    score = (FI age - current age) - ln(net worth at FI) / 10

The wealth term only breaks ties between paths that reach FI in the same
year. A path that never reaches FI gets a flat penalty.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

import numpy as np

if TYPE_CHECKING:
    from engine.path import Path
    from engine.runner import FinancialSnapshot

NO_FI_PENALTY = 1000.0


def score_projection(snapshots: Sequence["FinancialSnapshot"], current_age: int) -> float:
    retirement = next((s for s in snapshots if s.is_financially_independent), None)
    if retirement is None:
        return NO_FI_PENALTY

    age_score = retirement.age - current_age
    wealth_bonus = float(np.log(retirement.net_worth)) / 10
    return age_score - wealth_bonus


def calculate_path_score(path: "Path") -> float:
    return score_projection(path.projections, path.current_age)
