"""
Path — one complete scenario (assumptions + decisions) with its projection
and score, built in one shot. Changing an assumption means building a new Path.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence, Tuple

from core.config import DEFAULT_CONFIG, ProjectionConfig
from core.schema import AssumptionSet
from decisions.base import Decision

from .runner import FinancialSnapshot, ProjectionResult, project_path


@dataclass(frozen=True)
class Path:
    id: str
    name: str
    assumptions: AssumptionSet
    decisions: Tuple[Decision, ...] = ()
    description: str = ""
    projections: Tuple[FinancialSnapshot, ...] = ()
    retirement_age: Optional[int] = None
    target_amount: float = 0.0
    score: float = 0.0
    config: ProjectionConfig = field(default=DEFAULT_CONFIG, compare=False)

    @property
    def current_age(self) -> int:
        return int(self.assumptions.current_age.value)

    @property
    def result(self) -> ProjectionResult:
        return ProjectionResult(snapshots=self.projections, retirement_age=self.retirement_age)


def target_amount(assumptions: AssumptionSet, config: ProjectionConfig = DEFAULT_CONFIG) -> float:
    """Headline FI target: monthly expenses * 12 * target_amount_multiplier."""
    return assumptions.monthly_expenses.value * 12 * config.target_amount_multiplier


def build_path(
    assumptions: AssumptionSet,
    decisions: Sequence[Decision] = (),
    *,
    id: str = "current",
    name: str = "Current Path",
    description: str = "Your financial journey with current assumptions",
    config: ProjectionConfig = DEFAULT_CONFIG,
) -> Path:
    """Project `assumptions` + `decisions` and wrap the result in a scored Path."""
    # local import: insights depends on engine
    from insights.score import score_projection

    decisions = tuple(decisions)
    result = project_path(assumptions, decisions, config)
    return Path(
        id=id,
        name=name,
        description=description,
        assumptions=assumptions,
        decisions=decisions,
        projections=result.snapshots,
        retirement_age=result.retirement_age,
        target_amount=target_amount(assumptions, config),
        score=score_projection(result.snapshots, int(assumptions.current_age.value)),
        config=config,
    )
