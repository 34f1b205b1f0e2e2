"""Debt list operations: id assignment, creation defaults, removal.

Lists are treated as values: every operation returns a new list.
"""
from __future__ import annotations

import logging

from debt_planner.models.debt import Debt, DebtCreate
from debt_planner.simulation.payment import DEFAULT_TERM_MONTHS, resolve_minimum_payment

logger = logging.getLogger(__name__)


class DebtNotFoundError(KeyError):
    """Raised when a debt id is not present in the list."""


def next_debt_id(debts: list[Debt]) -> int:
    return max((debt.id for debt in debts), default=0) + 1


def create_debt(debts: list[Debt], payload: DebtCreate) -> Debt:
    """Build a new Debt from a validated payload, filling term and payment defaults."""
    total_terms = payload.total_terms or DEFAULT_TERM_MONTHS
    remaining_terms = payload.remaining_terms or total_terms
    debt = Debt(
        id=next_debt_id(debts),
        name=payload.name,
        amount=payload.amount,
        interest_rate=payload.interest_rate,
        total_terms=total_terms,
        remaining_terms=remaining_terms,
        monthly_payment=payload.monthly_payment or 0.0,
    )
    debt.monthly_payment = resolve_minimum_payment(debt)
    return debt


def add_debt(debts: list[Debt], payload: DebtCreate) -> tuple[list[Debt], Debt]:
    debt = create_debt(debts, payload)
    logger.info("Added debt %d (%s): %.2f at %.2f%%", debt.id, debt.name, debt.amount, debt.interest_rate)
    return [*debts, debt], debt


def remove_debt(debts: list[Debt], debt_id: int) -> list[Debt]:
    remaining = [debt for debt in debts if debt.id != debt_id]
    if len(remaining) == len(debts):
        raise DebtNotFoundError(debt_id)
    logger.info("Removed debt %d", debt_id)
    return remaining
