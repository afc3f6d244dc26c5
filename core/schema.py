"""
Assumption schema — the eight bounded numeric inputs that drive a projection.

Every assumption carries its own slider metadata (min/max/step/unit) so the
input layer can render and clamp it without a second lookup table. Sets are
immutable: the input layer replaces a value with update_assumption() and gets
a new set back.
"""

from __future__ import annotations

from typing import Dict, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

# Canonical assumption keys, in slider order.
ASSUMPTION_KEYS: Tuple[str, ...] = (
    "current_age",
    "salary",
    "income_tax_rate",
    "monthly_expenses",
    "monthly_savings",
    "current_savings",
    "inflation_rate",
    "investment_return",
)


class Assumption(BaseModel):
    """A single bounded numeric input."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    value: float
    min: float
    max: float
    step: float = Field(..., gt=0)
    unit: str = ""
    description: str = ""

    @model_validator(mode="after")
    def _check_bounds(self) -> "Assumption":
        if self.min > self.max:
            raise ValueError(f"{self.id}: min ({self.min}) exceeds max ({self.max})")
        return self

    def clamp(self, value: float) -> float:
        return min(max(float(value), self.min), self.max)

    def with_value(self, value: float, *, clamp: bool = True) -> "Assumption":
        new_value = self.clamp(value) if clamp else float(value)
        return self.model_copy(update={"value": new_value})

    @property
    def in_range(self) -> bool:
        return self.min <= self.value <= self.max


class AssumptionSet(BaseModel):
    """
    The full set of inputs for one projection.

    Accepts snake_case or camelCase keys, so payloads shaped like
    {"currentAge": {...}, "salary": {...}} validate as well.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    current_age: Assumption
    salary: Assumption
    income_tax_rate: Assumption
    monthly_expenses: Assumption
    monthly_savings: Assumption
    current_savings: Assumption
    inflation_rate: Assumption
    investment_return: Assumption

    def get(self, key: str) -> Assumption:
        if key not in ASSUMPTION_KEYS:
            raise KeyError(f"Unknown assumption '{key}'. Available: {list(ASSUMPTION_KEYS)}")
        return getattr(self, key)

    def items(self):
        return [(key, getattr(self, key)) for key in ASSUMPTION_KEYS]

    def values(self) -> Dict[str, float]:
        """Plain {key: value} view."""
        return {key: assumption.value for key, assumption in self.items()}


def create_default_assumptions() -> AssumptionSet:
    return AssumptionSet(
        current_age=Assumption(
            id="currentAge",
            name="Current Age",
            value=25,
            min=18,
            max=65,
            step=1,
            unit="years",
            description="Your current age",
        ),
        salary=Assumption(
            id="salary",
            name="Annual Salary",
            value=50000,
            min=20000,
            max=200000,
            step=5000,
            unit="€",
            description="Your current gross annual salary",
        ),
        income_tax_rate=Assumption(
            id="incomeTaxRate",
            name="Income Tax Rate",
            value=30,
            min=0,
            max=60,
            step=1,
            unit="%",
            description="Your effective income tax rate",
        ),
        monthly_expenses=Assumption(
            id="monthlyExpenses",
            name="Monthly Expenses",
            value=2500,
            min=500,
            max=8000,
            step=100,
            unit="€",
            description="Total monthly living expenses",
        ),
        monthly_savings=Assumption(
            id="monthlySavings",
            name="Monthly Savings",
            value=1000,
            min=0,
            max=5000,
            step=50,
            unit="€",
            description="Amount you save each month",
        ),
        current_savings=Assumption(
            id="currentSavings",
            name="Current Savings",
            value=10000,
            min=0,
            max=500000,
            step=1000,
            unit="€",
            description="Your existing savings and investments",
        ),
        inflation_rate=Assumption(
            id="inflationRate",
            name="Inflation Rate",
            value=2.5,
            min=0,
            max=10,
            step=0.5,
            unit="%",
            description="Expected annual inflation rate",
        ),
        investment_return=Assumption(
            id="investmentReturn",
            name="Investment Return",
            value=7,
            min=0,
            max=15,
            step=0.5,
            unit="%",
            description="Expected annual investment return",
        ),
    )


def update_assumption(
    assumptions: AssumptionSet,
    key: str,
    value: float,
    *,
    clamp: bool = True,
) -> AssumptionSet:
    """
    Return a copy of `assumptions` with one value replaced.

    Slider input is clamped to [min, max] by default. Pass clamp=False to
    hand the engine an out-of-range value as-is (what-if runs do this).
    """
    current = assumptions.get(key)
    return assumptions.model_copy(update={key: current.with_value(value, clamp=clamp)})


def update_assumptions(
    assumptions: AssumptionSet,
    overrides: Dict[str, float],
    *,
    clamp: bool = True,
) -> AssumptionSet:
    out = assumptions
    for key, value in overrides.items():
        out = update_assumption(out, key, value, clamp=clamp)
    return out
