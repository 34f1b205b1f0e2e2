"""Minimum payment calculator — fixed-rate amortized installment for one debt."""
from __future__ import annotations

from debt_planner.models.debt import Debt

DEFAULT_TERM_MONTHS = 240  # 20 years


def compute_minimum_payment(principal: float, annual_rate_percent: float, term_months: float) -> float:
    """Standard PMT formula with the rate given as an annual percentage.

    PMT = P * r / (1 - (1+r)^-n),  r = rate / 100 / 12

    Any zero, missing or negative input yields 0.0 instead of raising.
    Very long terms tend to the interest-only payment P * r.
    """
    if not principal or not annual_rate_percent or not term_months:
        return 0.0
    if principal < 0 or annual_rate_percent < 0 or term_months < 0:
        return 0.0
    r = annual_rate_percent / 100.0 / 12.0
    discount = 1.0 - (1.0 + r) ** -term_months
    if discount <= 0:
        return principal / term_months
    return principal * r / discount


def payment_term(debt: Debt) -> int:
    """Months used to size a missing minimum payment."""
    return debt.remaining_terms or debt.total_terms or DEFAULT_TERM_MONTHS


def resolve_minimum_payment(debt: Debt) -> float:
    """Return the debt's fixed minimum payment, computing it when missing or <= 0.

    Interest-free debts amortize straight-line over their term.
    """
    if debt.monthly_payment and debt.monthly_payment > 0:
        return debt.monthly_payment
    term = payment_term(debt)
    if debt.interest_rate == 0:
        return debt.amount / term if debt.amount > 0 else 0.0
    return compute_minimum_payment(debt.amount, debt.interest_rate, term)
