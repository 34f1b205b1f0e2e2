from enum import Enum
from typing import Optional

from pydantic import BaseModel


class Strategy(str, Enum):
    """Which debt receives the extra-payment pool first."""
    avalanche = "avalanche"  # highest interest rate first
    snowball = "snowball"    # smallest balance first


class DebtMonthState(BaseModel):
    """One debt's figures for a single month of the schedule."""
    debt_id: int
    name: str
    remaining_amount: float
    interest_paid: float = 0.0
    principal_paid: float = 0.0
    total_payment: float = 0.0
    minimum_payment: float = 0.0
    extra_payment: float = 0.0


class FreedPaymentMessage(BaseModel):
    """Note attached to the month a debt is first seen at zero balance."""
    debt_id: int
    debt_name: str
    freed_amount: float
    text: str


class MonthSnapshot(BaseModel):
    """One row of the amortization table."""
    month: int
    debts: list[DebtMonthState]
    freed_message: Optional[FreedPaymentMessage] = None


class PayoffResult(BaseModel):
    """Raw simulator output."""
    schedule: list[MonthSnapshot]
    final_effective_extra: float
