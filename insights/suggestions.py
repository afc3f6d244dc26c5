"""
What-if suggestions — single-variable sensitivities of the retirement age.

Each rule checks a threshold on the current assumptions, patches exactly one
value, re-projects with no decisions, and reports how many years earlier FI
would arrive:

  income     salary < 80k          salary + 10k
  expenses   expenses > 2000/mo    expenses - 500
  investing  return < 8%           return = 8%
  tax        tax rate > 25%        tax rate = 25%

These are independent sensitivities, not a joint optimization. Output order
is the rule order above; rank_suggestions() sorts by years saved.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from functools import lru_cache
from typing import Callable, List, Optional, Sequence

import pandas as pd

from core.config import DEFAULT_CONFIG, ProjectionConfig
from core.schema import AssumptionSet, update_assumption
from engine.path import Path
from engine.runner import project_path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SuggestionRule:
    key: str
    title: str
    tag: str
    applies: Callable[[AssumptionSet], bool]
    patch: Callable[[AssumptionSet], AssumptionSet]
    template: str  # formatted with years=<years saved>


@dataclass(frozen=True)
class Suggestion:
    key: str
    title: str
    description: str
    tag: str
    years_saved: int
    current_retirement_age: Optional[int]
    new_retirement_age: Optional[int]


def _patch(key: str, fn: Callable[[float], float]) -> Callable[[AssumptionSet], AssumptionSet]:
    def patch(assumptions: AssumptionSet) -> AssumptionSet:
        # what-if values are not clamped to the slider range
        return update_assumption(assumptions, key, fn(assumptions.get(key).value), clamp=False)

    return patch


SUGGESTION_RULES: Sequence[SuggestionRule] = (
    SuggestionRule(
        key="income",
        title="Increase Income",
        tag="Career Growth",
        applies=lambda a: a.salary.value < 80000,
        patch=_patch("salary", lambda v: v + 10000),
        template="A €10k salary increase could reduce your retirement age by {years} years.",
    ),
    SuggestionRule(
        key="expenses",
        title="Reduce Expenses",
        tag="Lifestyle",
        applies=lambda a: a.monthly_expenses.value > 2000,
        patch=_patch("monthly_expenses", lambda v: v - 500),
        template="Reducing expenses by €500/month could save {years} years.",
    ),
    SuggestionRule(
        key="investing",
        title="Investment Strategy",
        tag="Investing",
        applies=lambda a: a.investment_return.value < 8,
        patch=_patch("investment_return", lambda v: 8.0),
        template="Improving returns to 8% could save {years} years.",
    ),
    SuggestionRule(
        key="tax",
        title="Tax Optimization",
        tag="Location",
        applies=lambda a: a.income_tax_rate.value > 25,
        patch=_patch("income_tax_rate", lambda v: 25.0),
        template="Moving to a location with 25% tax rate could save {years} years.",
    ),
)


@lru_cache(maxsize=256)
def _retirement_age(assumptions: AssumptionSet, config: ProjectionConfig) -> Optional[int]:
    return project_path(assumptions, (), config).retirement_age


def years_saved(current_age: Optional[int], new_age: Optional[int]) -> int:
    """max(0, current - new); 0 when either path never reaches FI."""
    if current_age is None or new_age is None:
        return 0
    return max(0, int(current_age) - int(new_age))


def generate_suggestions(
    path: Path,
    *,
    rules: Sequence[SuggestionRule] = SUGGESTION_RULES,
    config: Optional[ProjectionConfig] = None,
) -> List[Suggestion]:
    """
    Evaluate every rule whose threshold holds for `path.assumptions`.

    Parameters
    ----------
    path : Path
        The scenario being improved. What-if runs drop the path's decisions,
        so the baseline is the decision-free retirement age of path.assumptions
        (path.retirement_age itself when the path has no decisions).
    rules : sequence of SuggestionRule
        Defaults to the four built-in rules.
    config : ProjectionConfig, optional
        Defaults to the path's own config.
    """
    cfg = config or path.config or DEFAULT_CONFIG
    out: List[Suggestion] = []

    baseline = path.retirement_age
    if path.decisions:
        baseline = _retirement_age(path.assumptions, cfg)

    for rule in rules:
        if not rule.applies(path.assumptions):
            continue

        new_age = _retirement_age(rule.patch(path.assumptions), cfg)
        saved = years_saved(baseline, new_age)
        logger.debug(
            "suggestion %s: retirement %s -> %s (%d years saved)",
            rule.key, baseline, new_age, saved,
        )
        out.append(
            Suggestion(
                key=rule.key,
                title=rule.title,
                description=rule.template.format(years=saved),
                tag=rule.tag,
                years_saved=saved,
                current_retirement_age=baseline,
                new_retirement_age=new_age,
            )
        )

    return out


def rank_suggestions(suggestions: Sequence[Suggestion]) -> List[Suggestion]:
    """Most years saved first; ties keep rule order."""
    return sorted(suggestions, key=lambda s: -s.years_saved)


def suggestions_to_dataframe(suggestions: Sequence[Suggestion]) -> pd.DataFrame:
    columns = [
        "key", "title", "description", "tag",
        "years_saved", "current_retirement_age", "new_retirement_age",
    ]
    return pd.DataFrame([asdict(s) for s in suggestions], columns=columns)
