"""
Core package — assumption schema, configuration, validation, and shared helpers.
No projection logic lives here.
"""

from .schema import (
    ASSUMPTION_KEYS,
    Assumption,
    AssumptionSet,
    create_default_assumptions,
    update_assumption,
    update_assumptions,
)
from .config import DEFAULT_CONFIG, ProjectionConfig
from .utils import annual_to_monthly, fi_number, monthly_to_annual, net_salary
from .validators import ValidationResult, validate_assumptions

__all__ = [
    "ASSUMPTION_KEYS",
    "Assumption",
    "AssumptionSet",
    "create_default_assumptions",
    "update_assumption",
    "update_assumptions",
    "DEFAULT_CONFIG",
    "ProjectionConfig",
    "annual_to_monthly",
    "fi_number",
    "monthly_to_annual",
    "net_salary",
    "ValidationResult",
    "validate_assumptions",
]
