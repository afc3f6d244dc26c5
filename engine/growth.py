"""
Investment growth helpers.

The projection re-seeds growth every year: last year's balance compounds
monthly for 12 months and this year's monthly savings rate is added as a
12-payment ordinary annuity. Contributions are not tracked one by one
across years.
"""

from __future__ import annotations


def monthly_rate(annual_return_pct: float) -> float:
    """7 (%) -> 0.07 / 12."""
    return annual_return_pct / 100 / 12


def annuity_future_value(payment: float, rate: float, n_periods: int) -> float:
    """FV of an ordinary annuity with a zero-rate guard (linear accumulation)."""
    if abs(rate) < 1e-12:
        return payment * n_periods
    return payment * ((1 + rate) ** n_periods - 1) / rate


def grow_one_year(balance: float, monthly_contribution: float, annual_return_pct: float) -> float:
    """Balance after one year of monthly compounding plus 12 monthly contributions."""
    r = monthly_rate(annual_return_pct)
    return balance * (1 + r) ** 12 + annuity_future_value(monthly_contribution, r, 12)
