"""
Sanity checks for an assumption set before it is handed to the engine.

The engine simulates whatever it is given. These checks exist for the input
layer, which wants to tell the user *why* a projection came back empty or odd:
- current age beyond the projection horizon (no snapshots at all)
- negative expenses (FI trivially reached, log-score undefined)
- values outside the slider range or off the slider grid
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from .config import DEFAULT_CONFIG, ProjectionConfig
from .schema import AssumptionSet
from .utils import is_on_step


@dataclass
class ValidationResult:
    """
    Problems found in one assumption set.

    errors block a meaningful projection; warnings only flag inputs the
    sliders could not have produced. flagged_keys lists the assumptions
    involved so the input layer can highlight those sliders.
    """
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    flagged_keys: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def flag(self, key: str, message: str, *, blocking: bool = False) -> None:
        (self.errors if blocking else self.warnings).append(message)
        if key not in self.flagged_keys:
            self.flagged_keys.append(key)

    def summary(self) -> str:
        if not self.errors and not self.warnings:
            return "All checks passed."
        sections = []
        if self.errors:
            sections.append("Cannot project:\n" + "\n".join(f"  - {e}" for e in self.errors))
        if self.warnings:
            sections.append("Check inputs:\n" + "\n".join(f"  - {w}" for w in self.warnings))
        return "\n".join(sections)


def validate_assumptions(
    assumptions: AssumptionSet,
    config: ProjectionConfig = DEFAULT_CONFIG,
) -> ValidationResult:
    """
    Run all checks on an assumption set.
    Returns a ValidationResult with errors (projection is meaningless) and
    warnings (projection runs, but on inputs the sliders would not produce).
    """
    result = ValidationResult()

    # --- Horizon ---
    age = assumptions.current_age.value
    if age > config.horizon_age:
        result.flag(
            "current_age",
            f"Current age {age:g} is past the projection horizon ({config.horizon_age}); "
            f"no years will be simulated.",
            blocking=True,
        )

    # --- Expenses ---
    if assumptions.monthly_expenses.value < 0:
        result.flag("monthly_expenses", "Monthly expenses are negative.", blocking=True)

    # --- Slider bounds / grid ---
    for key, a in assumptions.items():
        if not a.in_range:
            result.flag(
                key,
                f"{a.name} = {a.value:g} is outside [{a.min:g}, {a.max:g}]."
            )
        elif not is_on_step(a.value, a.min, a.step):
            result.flag(
                key,
                f"{a.name} = {a.value:g} is not a multiple of step {a.step:g} from {a.min:g}."
            )

    return result
