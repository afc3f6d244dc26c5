from __future__ import annotations


def net_salary(gross_salary: float, tax_rate_pct: float) -> float:
    """Flat-rate net salary; tax_rate_pct is in percent (30 = 30%)."""
    return gross_salary * (1 - tax_rate_pct / 100)


def annual_to_monthly(annual_amount: float) -> float:
    return annual_amount / 12


def monthly_to_annual(monthly_amount: float) -> float:
    return monthly_amount * 12


def fi_number(annual_expenses: float, multiplier: float = 25.0) -> float:
    """Wealth needed for financial independence (25x = the "4% rule")."""
    return annual_expenses * multiplier


def is_on_step(value: float, start: float, step: float, *, tol: float = 1e-9) -> bool:
    """True if value sits on the grid start, start+step, start+2*step, ..."""
    n = (value - start) / step
    return abs(n - round(n)) < tol

