"""
Headline metrics for one path — the numbers shown next to the charts.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import pandas as pd

from core.utils import annual_to_monthly, net_salary
from engine.path import Path


@dataclass(frozen=True)
class PathMetrics:
    retirement_age: Optional[int]
    years_to_fi: Optional[int]
    final_net_worth: float
    final_annual_savings: float
    monthly_net_income: float
    monthly_savings: float
    savings_rate_pct: float
    fi_number: float
    score: float

    def to_dataframe(self) -> pd.DataFrame:
        """Convert to a display-friendly table."""
        never = "Never"
        rows = [
            {"Metric": "Retirement Age",
             "Value": str(self.retirement_age) if self.retirement_age is not None else never,
             "Unit": "years"},
            {"Metric": "Years to FI",
             "Value": str(self.years_to_fi) if self.years_to_fi is not None else never,
             "Unit": "years"},
            {"Metric": "Final Net Worth", "Value": f"{self.final_net_worth:,.0f}", "Unit": "€"},
            {"Metric": "Final Annual Savings", "Value": f"{self.final_annual_savings:,.0f}", "Unit": "€"},
            {"Metric": "Monthly Net Income", "Value": f"{self.monthly_net_income:,.0f}", "Unit": "€"},
            {"Metric": "Monthly Savings", "Value": f"{self.monthly_savings:,.0f}", "Unit": "€"},
            {"Metric": "Savings Rate", "Value": f"{self.savings_rate_pct:.0f}%", "Unit": ""},
            {"Metric": "FI Number", "Value": f"{self.fi_number:,.0f}", "Unit": "€"},
            {"Metric": "Path Score", "Value": f"{self.score:.2f}", "Unit": ""},
        ]
        return pd.DataFrame(rows)


def compute_path_metrics(path: Path) -> PathMetrics:
    """
    Summarize a built path.

    Income and savings-rate figures come from the base assumptions (decisions are
    not applied); retirement age and net worth come from the projection.
    """
    a = path.assumptions
    monthly_net = annual_to_monthly(net_salary(a.salary.value, a.income_tax_rate.value))
    monthly_savings = a.monthly_savings.value

    years_to_fi = None
    if path.retirement_age is not None:
        years_to_fi = path.retirement_age - path.current_age

    return PathMetrics(
        retirement_age=path.retirement_age,
        years_to_fi=years_to_fi,
        final_net_worth=path.projections[-1].net_worth if path.projections else 0.0,
        final_annual_savings=path.projections[-1].monthly_savings * 12 if path.projections else 0.0,
        monthly_net_income=monthly_net,
        monthly_savings=monthly_savings,
        savings_rate_pct=monthly_savings / max(1.0, monthly_net) * 100,
        fi_number=path.target_amount,
        score=path.score,
    )
