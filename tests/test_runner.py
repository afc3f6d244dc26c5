import math

import pytest

from core.config import ProjectionConfig
from core.schema import update_assumption, update_assumptions
from decisions.base import Decision, DecisionImpact, DecisionType
from engine.growth import annuity_future_value, grow_one_year
from engine.runner import SNAPSHOT_COLUMNS, project_path


def test_same_inputs_give_identical_projection(defaults, config):
    first = project_path(defaults, (), config)
    second = project_path(defaults, (), config)

    assert first == second


def test_one_snapshot_per_age_through_horizon(defaults, config):
    result = project_path(defaults, (), config)

    assert len(result) == 81 - 25
    for i, snap in enumerate(result.snapshots):
        assert snap.age == 25 + i
        assert snap.year == 2025 + i
    assert result.snapshots[-1].age == 80


def test_custom_horizon(defaults):
    result = project_path(defaults, (), ProjectionConfig(horizon_age=60, start_year=2000))

    assert len(result) == 36
    assert result.snapshots[-1].age == 60


def test_age_past_horizon_gives_empty_projection(defaults, config):
    old = update_assumption(defaults, "current_age", 85, clamp=False)

    result = project_path(old, (), config)

    assert result.snapshots == ()
    assert result.retirement_age is None
    assert result.final_net_worth == 0.0


def test_default_scenario_reaches_fi(defaults, config):
    result = project_path(defaults, (), config)
    worth = [s.net_worth for s in result.snapshots]

    assert all(b > a for a, b in zip(worth, worth[1:]))
    assert result.retirement_age is not None
    assert result.retirement_age > 25

    crossing = result.retirement_snapshot
    assert crossing.age == result.retirement_age
    assert crossing.net_worth >= defaults.monthly_expenses.value * 12 * 25


def test_first_year_adds_savings_without_growth(defaults, config):
    first = project_path(defaults, (), config).snapshots[0]

    assert first.investment_value == 10000 + 1000 * 12
    assert first.net_worth == first.investment_value
    assert first.total_savings == 12000
    assert first.gross_salary == 50000
    assert first.net_salary == pytest.approx(35000)


def test_later_years_compound_monthly(defaults, config):
    snaps = project_path(defaults, (), config).snapshots
    r = 0.07 / 12
    expected = 22000 * (1 + r) ** 12 + 1000 * ((1 + r) ** 12 - 1) / r

    assert snaps[1].investment_value == pytest.approx(expected)
    assert snaps[1].total_savings == 24000


def test_zero_return_accumulates_linearly(defaults, config):
    flat = update_assumption(defaults, "investment_return", 0)

    snaps = project_path(flat, (), config).snapshots

    assert snaps[0].net_worth == 22000
    assert snaps[1].net_worth == 34000
    assert snaps[10].net_worth == 22000 + 10 * 12000
    assert not any(math.isnan(s.net_worth) for s in snaps)


def test_zero_return_and_no_contributions_keeps_balance(defaults, config):
    idle = update_assumptions(defaults, {"investment_return": 0, "monthly_savings": 0})

    snaps = project_path(idle, (), config).snapshots

    assert all(s.net_worth == 10000 for s in snaps)


def test_never_fi(never_fi, config):
    result = project_path(never_fi, (), config)

    assert result.retirement_age is None
    assert not result.reaches_fi
    assert not any(s.is_financially_independent for s in result.snapshots)


def test_retirement_age_is_first_fi_year_even_if_fi_is_lost_later(defaults, config):
    base_age = project_path(defaults, (), config).retirement_age
    assert base_age < 60

    splurge = Decision(
        id="splurge",
        type=DecisionType.PROPERTY_DECISION,
        name="Villa",
        start_age=60,
        impact=DecisionImpact(expenses_change=100000),
    )
    result = project_path(defaults, [splurge], config)
    by_age = {s.age: s for s in result.snapshots}

    assert result.retirement_age == base_age
    assert by_age[base_age].is_financially_independent
    assert not by_age[60].is_financially_independent


def test_decision_window_only_touches_its_ages(defaults, config):
    raise_ = Decision(
        id="raise",
        type=DecisionType.SALARY_CHANGE,
        name="Promotion",
        start_age=40,
        end_age=45,
        impact=DecisionImpact(salary_multiplier=2, expenses_change=300, additional_income=200),
    )
    by_age = {s.age: s for s in project_path(defaults, [raise_], config).snapshots}

    for age in (39, 46, 60):
        assert by_age[age].gross_salary == 50000
        assert by_age[age].monthly_expenses == 2500
        assert by_age[age].monthly_savings == 1000
    for age in range(40, 46):
        assert by_age[age].gross_salary == 100000
        assert by_age[age].monthly_expenses == 2800
        assert by_age[age].monthly_savings == 1200


def test_additional_income_goes_to_savings_not_net_salary(defaults, config):
    side = Decision(
        id="side",
        type=DecisionType.SIDE_INCOME,
        name="Side",
        start_age=25,
        impact=DecisionImpact(additional_income=500),
    )
    first = project_path(defaults, [side], config).snapshots[0]

    assert first.net_salary == pytest.approx(35000)
    assert first.monthly_savings == 1500
    assert first.investment_value == 10000 + 1500 * 12


def test_fi_multiplier_is_configurable(defaults):
    easy = project_path(defaults, (), ProjectionConfig(retirement_target_multiplier=10, start_year=2025))
    hard = project_path(defaults, (), ProjectionConfig(retirement_target_multiplier=25, start_year=2025))

    assert easy.retirement_age < hard.retirement_age


def test_to_dataframe(defaults, config):
    df = project_path(defaults, (), config).to_dataframe()

    assert list(df.columns) == SNAPSHOT_COLUMNS
    assert len(df) == 56
    assert df["age"].is_monotonic_increasing


def test_growth_helpers():
    assert annuity_future_value(100, 0.0, 12) == 1200
    assert grow_one_year(1000, 0, 0) == 1000
    assert grow_one_year(0, 100, 12) == pytest.approx(100 * ((1.01 ** 12) - 1) / 0.01)


def test_inflation_rate_does_not_change_projection(defaults, config):
    inflated = update_assumption(defaults, "inflation_rate", 10)

    assert project_path(inflated, (), config) == project_path(defaults, (), config)
