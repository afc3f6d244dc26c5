"""
Projection runner — walks one person's finances year by year from current age
to the horizon and reports when net worth first covers the FI number.

Per simulated age:
  1. fold active decisions over base salary / tax rate / monthly expenses
  2. net salary at the flat tax rate
  3. monthly savings = base monthly savings + decision side income
  4. grow the investment balance (first year: plain addition, no growth)
  5. FI check: net worth >= annual expenses * retirement_target_multiplier

The runner is pure. The retirement age is part of the returned
ProjectionResult rather than written back onto a path, so the same inputs
can be projected any number of times (the suggestion generator relies on this).
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Optional, Sequence, Tuple

import pandas as pd

from core.config import DEFAULT_CONFIG, ProjectionConfig
from core.schema import AssumptionSet
from core.utils import fi_number, monthly_to_annual, net_salary
from decisions.base import Decision
from decisions.impact import ImpactState, fold_decisions

from .growth import grow_one_year

logger = logging.getLogger(__name__)

SNAPSHOT_COLUMNS = [
    "age",
    "year",
    "gross_salary",
    "net_salary",
    "monthly_expenses",
    "monthly_savings",
    "total_savings",
    "investment_value",
    "net_worth",
    "is_financially_independent",
]


@dataclass(frozen=True)
class FinancialSnapshot:
    """One simulated year."""
    age: int
    year: int
    gross_salary: float
    net_salary: float
    monthly_expenses: float
    monthly_savings: float
    total_savings: float       # running sum of contributions, no growth
    investment_value: float
    net_worth: float
    is_financially_independent: bool


@dataclass(frozen=True)
class ProjectionResult:
    snapshots: Tuple[FinancialSnapshot, ...]
    retirement_age: Optional[int] = None

    def __len__(self) -> int:
        return len(self.snapshots)

    @property
    def reaches_fi(self) -> bool:
        return self.retirement_age is not None

    @property
    def retirement_snapshot(self) -> Optional[FinancialSnapshot]:
        for snap in self.snapshots:
            if snap.is_financially_independent:
                return snap
        return None

    @property
    def final_net_worth(self) -> float:
        return self.snapshots[-1].net_worth if self.snapshots else 0.0

    def to_dataframe(self) -> pd.DataFrame:
        """One row per snapshot, ascending age."""
        return pd.DataFrame([asdict(s) for s in self.snapshots], columns=SNAPSHOT_COLUMNS)


def project_path(
    assumptions: AssumptionSet,
    decisions: Sequence[Decision] = (),
    config: ProjectionConfig = DEFAULT_CONFIG,
) -> ProjectionResult:
    """
    Project net worth from current age to config.horizon_age (inclusive).

    Parameters
    ----------
    assumptions : AssumptionSet
        Base inputs. Values are used as-is (no clamping).
    decisions : sequence of Decision
        Applied in order at every age; see decisions.impact.fold_decisions.
    config : ProjectionConfig
        Horizon, FI multiplier, first calendar year.

    Returns
    -------
    ProjectionResult with one snapshot per age and the first FI age (or None).
    A current age past the horizon yields no snapshots.
    """
    current_age = int(assumptions.current_age.value)
    first_year = config.first_year()

    base = ImpactState(
        salary=assumptions.salary.value,
        tax_rate=assumptions.income_tax_rate.value,
        expenses=assumptions.monthly_expenses.value,
    )
    base_monthly_savings = assumptions.monthly_savings.value
    annual_return = assumptions.investment_return.value

    snapshots = []
    retirement_age: Optional[int] = None
    total_savings = 0.0
    investment_value = assumptions.current_savings.value

    for age in range(current_age, config.horizon_age + 1):
        state = fold_decisions(base, decisions, age)

        net = net_salary(state.salary, state.tax_rate)
        monthly_savings = base_monthly_savings + state.additional_income
        annual_savings = monthly_to_annual(monthly_savings)

        if age == current_age:
            investment_value = investment_value + annual_savings
        else:
            investment_value = grow_one_year(investment_value, monthly_savings, annual_return)

        total_savings += annual_savings

        net_worth = investment_value
        target = fi_number(monthly_to_annual(state.expenses), config.retirement_target_multiplier)
        is_fi = net_worth >= target

        snapshots.append(
            FinancialSnapshot(
                age=age,
                year=first_year + (age - current_age),
                gross_salary=state.salary,
                net_salary=net,
                monthly_expenses=state.expenses,
                monthly_savings=monthly_savings,
                total_savings=total_savings,
                investment_value=investment_value,
                net_worth=net_worth,
                is_financially_independent=is_fi,
            )
        )

        if is_fi and retirement_age is None:
            retirement_age = age
            logger.debug("FI reached at age %d (net worth %.0f >= %.0f)", age, net_worth, target)

    if retirement_age is None:
        logger.debug(
            "FI not reached by age %d (%d years simulated)", config.horizon_age, len(snapshots)
        )

    return ProjectionResult(snapshots=tuple(snapshots), retirement_age=retirement_age)
