"""
Decision application — fold an ordered list of decisions over the base
salary / tax rate / expenses for one simulated age.

Order matters: each decision sees the salary, tax rate and expenses produced
by the decisions before it.
"""

from __future__ import annotations

from functools import reduce
from typing import Iterable, NamedTuple

from .base import Decision


class ImpactState(NamedTuple):
    """Accumulator threaded through the decision fold."""
    salary: float
    tax_rate: float
    expenses: float
    additional_income: float = 0.0


def apply_decision_impact(
    base_salary: float,
    base_tax_rate: float,
    base_expenses: float,
    decision: Decision,
    age: float,
) -> ImpactState:
    """
    Apply one decision at one age.

    Inactive decisions return the base values unchanged with
    additional_income = 0. one_time_payment is never read.
    """
    if not decision.is_active(age):
        return ImpactState(base_salary, base_tax_rate, base_expenses, 0.0)

    impact = decision.impact
    multiplier = impact.salary_multiplier if impact.salary_multiplier is not None else 1.0
    return ImpactState(
        salary=base_salary * multiplier,
        tax_rate=base_tax_rate + (impact.tax_rate_change or 0.0),
        expenses=base_expenses + (impact.expenses_change or 0.0),
        additional_income=impact.additional_income or 0.0,
    )


def _step(age: float):
    def step(state: ImpactState, decision: Decision) -> ImpactState:
        out = apply_decision_impact(state.salary, state.tax_rate, state.expenses, decision, age)
        return out._replace(additional_income=state.additional_income + out.additional_income)

    return step


def fold_decisions(
    base: ImpactState,
    decisions: Iterable[Decision],
    age: float,
) -> ImpactState:
    """
    Left fold of `decisions` over `base` for a single age.

    salary / tax_rate / expenses carry forward from one decision to the next;
    additional_income accumulates across every active decision.
    """
    return reduce(_step(age), decisions, base)
