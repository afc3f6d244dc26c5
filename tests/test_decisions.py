import pytest
from pydantic import ValidationError

from decisions.base import Decision, DecisionImpact, DecisionType
from decisions.impact import ImpactState, apply_decision_impact, fold_decisions


def _decision(**kwargs):
    base = dict(id="d", type=DecisionType.SALARY_CHANGE, name="D", start_age=40)
    base.update(kwargs)
    return Decision(**base)


def test_window_is_inclusive_on_both_ends():
    d = _decision(start_age=40, end_age=45)

    assert not d.is_active(39)
    assert d.is_active(40)
    assert d.is_active(45)
    assert not d.is_active(46)


def test_open_ended_decision_stays_active():
    d = _decision(start_age=40)

    assert d.is_active(80)


def test_end_before_start_is_rejected():
    with pytest.raises(ValidationError):
        _decision(start_age=40, end_age=39)


def test_unknown_impact_field_is_rejected():
    with pytest.raises(ValidationError):
        DecisionImpact(salaryBoost=2)


def test_unknown_decision_type_is_rejected():
    with pytest.raises(ValidationError):
        _decision(type="lottery_win")


def test_camel_case_payload():
    d = Decision.model_validate(
        {
            "id": "move",
            "type": "location_change",
            "name": "Move",
            "startAge": 30,
            "endAge": 35,
            "impact": {"taxRateChange": -5, "expensesChange": -300},
        }
    )

    assert d.type is DecisionType.LOCATION_CHANGE
    assert (d.start_age, d.end_age) == (30, 35)
    assert d.impact.tax_rate_change == -5


def test_inactive_decision_returns_base_values():
    d = _decision(start_age=40, impact=DecisionImpact(salary_multiplier=2, additional_income=300))

    out = apply_decision_impact(50000, 30, 2500, d, age=39)

    assert out == ImpactState(50000, 30, 2500, 0.0)


def test_active_decision_applies_every_field():
    impact = DecisionImpact(
        salary_multiplier=1.5,
        tax_rate_change=-5,
        expenses_change=200,
        additional_income=300,
        one_time_payment=50000,
    )
    d = _decision(start_age=40, impact=impact)

    out = apply_decision_impact(50000, 30, 2500, d, age=40)

    # one_time_payment has no effect
    assert out == ImpactState(75000, 25, 2700, 300)


def test_empty_impact_is_a_no_op_while_active():
    out = apply_decision_impact(50000, 30, 2500, _decision(), age=50)

    assert out == ImpactState(50000, 30, 2500, 0.0)


def test_zero_multiplier_zeroes_salary():
    d = _decision(impact=DecisionImpact(salary_multiplier=0))

    assert apply_decision_impact(50000, 30, 2500, d, age=40).salary == 0


def test_fold_carries_values_and_accumulates_income():
    decisions = [
        _decision(id="a", start_age=30, impact=DecisionImpact(salary_multiplier=2, additional_income=100)),
        _decision(id="b", start_age=30, impact=DecisionImpact(salary_multiplier=1.5, tax_rate_change=5)),
        _decision(id="c", start_age=30, impact=DecisionImpact(expenses_change=-500, additional_income=250)),
        _decision(id="late", start_age=60, impact=DecisionImpact(additional_income=1000)),
    ]
    base = ImpactState(50000, 30, 2500)

    out = fold_decisions(base, decisions, age=35)

    assert out.salary == pytest.approx(150000)
    assert out.tax_rate == 35
    assert out.expenses == 2000
    assert out.additional_income == 350


def test_fold_with_no_decisions_returns_base():
    base = ImpactState(50000, 30, 2500)

    assert fold_decisions(base, [], age=40) == base
