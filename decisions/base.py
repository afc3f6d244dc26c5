"""
Decision records — life events that modify the base assumptions for a window of ages.

A decision is active at age a iff a >= start_age and (end_age is None or
a <= end_age). Its impact is a mix of multiplicative (salary) and additive
(tax rate, expenses, extra monthly income) effects; see decisions/impact.py
for how several decisions compose.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class DecisionType(str, Enum):
    SALARY_CHANGE = "salary_change"
    LOCATION_CHANGE = "location_change"
    CAREER_PIVOT = "career_pivot"
    WORK_SCHEDULE = "work_schedule"
    INVESTMENT_STRATEGY = "investment_strategy"
    PROPERTY_DECISION = "property_decision"
    SIDE_INCOME = "side_income"


class DecisionImpact(BaseModel):
    """
    Effects of a decision while it is active. Every field is optional; an
    absent field means "no effect" (multiplier 1, change 0).

    one_time_payment is part of the record but is not applied by the engine.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    salary_multiplier: Optional[float] = Field(None, ge=0)
    tax_rate_change: Optional[float] = None
    expenses_change: Optional[float] = None
    additional_income: Optional[float] = None
    one_time_payment: Optional[float] = None


class Decision(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: str
    type: DecisionType
    name: str
    description: str = ""
    start_age: int
    end_age: Optional[int] = None
    impact: DecisionImpact = Field(default_factory=DecisionImpact)

    @model_validator(mode="after")
    def _check_window(self) -> "Decision":
        if self.end_age is not None and self.end_age < self.start_age:
            raise ValueError(
                f"Decision '{self.id}': end_age ({self.end_age}) is before start_age ({self.start_age})"
            )
        return self

    def is_active(self, age: float) -> bool:
        if age < self.start_age:
            return False
        return self.end_age is None or age <= self.end_age
