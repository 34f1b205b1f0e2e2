"""Tests for debt list operations."""
import pytest

from debt_planner.models.debt import Debt, DebtCreate
from debt_planner.services.debt_service import (
    DebtNotFoundError,
    add_debt,
    create_debt,
    next_debt_id,
    remove_debt,
)
from debt_planner.simulation.payment import compute_minimum_payment


def _debt(debt_id: int) -> Debt:
    return Debt(id=debt_id, name=f"D{debt_id}", amount=100.0, interest_rate=5.0, monthly_payment=10.0)


def test_next_id_empty_list():
    assert next_debt_id([]) == 1


def test_next_id_is_max_plus_one():
    assert next_debt_id([_debt(3), _debt(7), _debt(2)]) == 8


def test_create_fills_defaults():
    debt = create_debt([], DebtCreate(name="Card", amount=5000.0, interest_rate=18.0))
    assert debt.id == 1
    assert debt.total_terms == 240
    assert debt.remaining_terms == 240
    assert debt.monthly_payment == pytest.approx(compute_minimum_payment(5000.0, 18.0, 240))


def test_create_remaining_defaults_to_total():
    debt = create_debt([], DebtCreate(name="Car", amount=12_000.0, interest_rate=6.0, total_terms=60))
    assert debt.remaining_terms == 60
    assert debt.monthly_payment == pytest.approx(compute_minimum_payment(12_000.0, 6.0, 60))


def test_create_keeps_explicit_payment():
    payload = DebtCreate(name="Card", amount=5000.0, interest_rate=18.0, monthly_payment=150.0)
    assert create_debt([], payload).monthly_payment == 150.0


def test_create_interest_free_debt():
    payload = DebtCreate(name="Family", amount=1200.0, interest_rate=0.0, total_terms=12)
    assert create_debt([], payload).monthly_payment == 100.0


def test_create_strips_name():
    assert create_debt([], DebtCreate(name="  Card ", amount=10.0, interest_rate=1.0)).name == "Card"


def test_create_rejects_blank_name():
    with pytest.raises(ValueError):
        DebtCreate(name="   ", amount=10.0, interest_rate=1.0)


def test_create_rejects_non_positive_amount():
    with pytest.raises(ValueError):
        DebtCreate(name="Card", amount=0.0, interest_rate=1.0)


def test_create_rejects_negative_rate():
    with pytest.raises(ValueError):
        DebtCreate(name="Card", amount=10.0, interest_rate=-1.0)


def test_debt_shares_create_validation():
    with pytest.raises(ValueError):
        Debt(id=1, name="", amount=10.0, interest_rate=1.0)
    with pytest.raises(ValueError):
        Debt(id=1, name="Card", amount=10.0, interest_rate=-24.0)
    with pytest.raises(ValueError):
        Debt(id=1, name="Card", amount=10.0, interest_rate=1.0, remaining_terms=0)


def test_add_returns_new_list():
    debts = [_debt(1)]
    updated, debt = add_debt(debts, DebtCreate(name="New", amount=50.0, interest_rate=3.0))
    assert len(debts) == 1
    assert [d.id for d in updated] == [1, 2]
    assert debt.id == 2


def test_remove_debt():
    debts = [_debt(1), _debt(2), _debt(3)]
    assert [d.id for d in remove_debt(debts, 2)] == [1, 3]
    assert len(debts) == 3


def test_remove_missing_debt_raises():
    with pytest.raises(DebtNotFoundError):
        remove_debt([_debt(1)], 99)
