"""
Predefined scenarios — named starting points for the dashboard.

A scenario is a partial set of assumption overrides plus the decisions that
usually come with it (e.g. "geo_arbitrage" moves somewhere cheaper with a lower
tax rate from age 30 on). Overrides are applied on top of whatever assumption
set the user already has, so untouched sliders keep their values.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from core.config import DEFAULT_CONFIG, ProjectionConfig
from core.schema import ASSUMPTION_KEYS, AssumptionSet, create_default_assumptions, update_assumptions
from decisions.base import Decision, DecisionImpact, DecisionType
from engine.path import Path, build_path

logger = logging.getLogger(__name__)


class Scenario(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    id: str
    name: str
    description: str = ""
    base_assumptions: Dict[str, float] = Field(default_factory=dict)
    suggested_decisions: Tuple[Decision, ...] = ()
    tags: Tuple[str, ...] = ()


PREDEFINED_SCENARIOS: Dict[str, Scenario] = {
    "baseline": Scenario(
        id="baseline",
        name="Baseline",
        description="Default assumptions, no life decisions.",
        tags=("default",),
    ),
    "career_pivot": Scenario(
        id="career_pivot",
        name="Career Pivot",
        description="Two lean retraining years at 30, then a 40% higher salary.",
        suggested_decisions=(
            Decision(
                id="retraining",
                type=DecisionType.CAREER_PIVOT,
                name="Retraining",
                description="Half salary while retraining",
                start_age=30,
                end_age=31,
                impact=DecisionImpact(salary_multiplier=0.5),
            ),
            Decision(
                id="new_career",
                type=DecisionType.SALARY_CHANGE,
                name="New Career",
                description="Higher pay after the switch",
                start_age=32,
                impact=DecisionImpact(salary_multiplier=1.4),
            ),
        ),
        tags=("career", "income"),
    ),
    "geo_arbitrage": Scenario(
        id="geo_arbitrage",
        name="Geo Arbitrage",
        description="Move to a lower-cost, lower-tax location at 30.",
        suggested_decisions=(
            Decision(
                id="relocate",
                type=DecisionType.LOCATION_CHANGE,
                name="Relocate",
                description="Lower rent and a lower effective tax rate",
                start_age=30,
                impact=DecisionImpact(tax_rate_change=-5, expenses_change=-600),
            ),
        ),
        tags=("location", "tax", "lifestyle"),
    ),
    "side_hustle": Scenario(
        id="side_hustle",
        name="Side Hustle",
        description="An extra 500/month of side income, all of it saved, from 28 to 40.",
        suggested_decisions=(
            Decision(
                id="side_income",
                type=DecisionType.SIDE_INCOME,
                name="Side Business",
                start_age=28,
                end_age=40,
                impact=DecisionImpact(additional_income=500),
            ),
        ),
        tags=("income",),
    ),
    "part_time": Scenario(
        id="part_time",
        name="Part-Time From 45",
        description="Higher savings early, then a four-day week from 45.",
        base_assumptions={"monthly_savings": 1500, "monthly_expenses": 2200},
        suggested_decisions=(
            Decision(
                id="four_day_week",
                type=DecisionType.WORK_SCHEDULE,
                name="Four-Day Week",
                start_age=45,
                impact=DecisionImpact(salary_multiplier=0.8),
            ),
        ),
        tags=("lifestyle", "work"),
    ),
}


def list_scenarios() -> List[str]:
    return list(PREDEFINED_SCENARIOS.keys())


def get_scenario(scenario_id: str) -> Scenario:
    if scenario_id not in PREDEFINED_SCENARIOS:
        raise KeyError(
            f"Unknown scenario '{scenario_id}'. "
            f"Available: {list_scenarios()}"
        )
    return PREDEFINED_SCENARIOS[scenario_id]


def apply_scenario(
    scenario: Scenario,
    assumptions: AssumptionSet | None = None,
) -> Tuple[AssumptionSet, Tuple[Decision, ...]]:
    """
    Overlay the scenario's overrides on `assumptions` (defaults if None).
    Overrides are clamped to the slider ranges like any other input.
    """
    unknown = [k for k in scenario.base_assumptions if k not in ASSUMPTION_KEYS]
    if unknown:
        raise KeyError(f"Scenario '{scenario.id}' overrides unknown assumptions: {unknown}")

    base = assumptions if assumptions is not None else create_default_assumptions()
    out = update_assumptions(base, scenario.base_assumptions)
    logger.debug(
        "scenario %s: %d overrides, %d decisions",
        scenario.id, len(scenario.base_assumptions), len(scenario.suggested_decisions),
    )
    return out, tuple(scenario.suggested_decisions)


def build_scenario_path(
    scenario_id: str,
    assumptions: AssumptionSet | None = None,
    *,
    config: ProjectionConfig = DEFAULT_CONFIG,
) -> Path:
    scenario = get_scenario(scenario_id)
    merged, decisions = apply_scenario(scenario, assumptions)
    return build_path(
        merged,
        decisions,
        id=scenario.id,
        name=scenario.name,
        description=scenario.description,
        config=config,
    )
