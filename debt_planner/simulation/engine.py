"""Payoff simulation engine.

Runs a month-by-month payoff of several debts under one strategy:
minimum payments on every open debt, then a single waterfall pass that
hands the extra pool to debts in strategy order. A debt's minimum payment
joins the extra pool from the month its balance is first seen at zero.
"""
from __future__ import annotations

import logging

from debt_planner.models.debt import Debt
from debt_planner.models.schedule import (
    DebtMonthState,
    FreedPaymentMessage,
    MonthSnapshot,
    PayoffResult,
    Strategy,
)
from debt_planner.simulation.payment import resolve_minimum_payment
from debt_planner.simulation.strategies import order_debts

logger = logging.getLogger(__name__)

MAX_MONTHS = 600  # 50 years


def _working_copy(debt: Debt) -> Debt:
    """Deep copy with the minimum payment resolved and frozen for the run."""
    copy = debt.model_copy(deep=True)
    copy.monthly_payment = resolve_minimum_payment(copy)
    return copy


def _format_currency(value: float) -> str:
    return f"${value:,.2f}"


def _freed_message(debt: Debt) -> FreedPaymentMessage:
    return FreedPaymentMessage(
        debt_id=debt.id,
        debt_name=debt.name,
        freed_amount=debt.monthly_payment,
        text=(
            f"{debt.name} paid off! {_format_currency(debt.monthly_payment)} "
            f"added to the monthly extra contribution."
        ),
    )


def _pay_minimum(debt: Debt) -> DebtMonthState:
    """Apply one month of interest and minimum payment to a working debt."""
    if debt.amount <= 0:
        return DebtMonthState(debt_id=debt.id, name=debt.name, remaining_amount=0.0)

    monthly_interest = debt.amount * debt.interest_rate / 100.0 / 12.0
    if debt.amount + monthly_interest <= debt.monthly_payment:
        # Final installment clears the balance exactly
        payment = debt.amount + monthly_interest
        principal_paid = debt.amount
    else:
        payment = debt.monthly_payment
        principal_paid = max(0.0, payment - monthly_interest)
    debt.amount = max(0.0, debt.amount - principal_paid)

    return DebtMonthState(
        debt_id=debt.id,
        name=debt.name,
        remaining_amount=debt.amount,
        interest_paid=min(monthly_interest, payment),
        principal_paid=principal_paid,
        total_payment=payment,
        minimum_payment=payment,
        extra_payment=0.0,
    )


def _apply_extra(debts: list[Debt], states: list[DebtMonthState], available: float) -> None:
    """Waterfall the extra pool over debts in order until it runs out."""
    for debt, state in zip(debts, states):
        if available <= 0:
            break
        if debt.amount <= 0:
            continue
        extra = min(debt.amount, available)
        debt.amount = max(0.0, debt.amount - extra)
        state.principal_paid += extra
        state.total_payment += extra
        state.extra_payment = extra
        state.remaining_amount = debt.amount
        available -= extra


def simulate(
    debts: list[Debt],
    strategy: Strategy | str,
    extra_contribution: float,
) -> PayoffResult:
    """Simulate paying off ``debts`` under ``strategy`` with a monthly extra budget.

    The caller's debts are never mutated. Returns the month snapshots and the
    final effective extra contribution (base extra plus every freed minimum
    payment). The run stops at MAX_MONTHS without raising if debt is still
    outstanding.
    """
    if not debts:
        return PayoffResult(schedule=[], final_effective_extra=extra_contribution)

    working = order_debts([_working_copy(d) for d in debts], strategy)

    schedule: list[MonthSnapshot] = []
    retired: set[int] = set()
    running_extra = extra_contribution
    all_paid = False
    month = 0

    while not all_paid and month < MAX_MONTHS:
        month += 1

        # Only the last debt retired in a month keeps its message
        freed_message = None
        for idx, debt in enumerate(working):
            if debt.amount <= 0 and idx not in retired:
                retired.add(idx)
                running_extra += debt.monthly_payment
                freed_message = _freed_message(debt)

        states = [_pay_minimum(debt) for debt in working]
        _apply_extra(working, states, running_extra)

        schedule.append(MonthSnapshot(month=month, debts=states, freed_message=freed_message))
        all_paid = all(debt.amount <= 0 for debt in working)

    if not all_paid:
        outstanding = sum(debt.amount for debt in working)
        logger.warning(
            "Payoff not reached within %d months: %.2f still outstanding",
            MAX_MONTHS, outstanding,
        )

    return PayoffResult(schedule=schedule, final_effective_extra=running_extra)
