from datetime import datetime

from pydantic import BaseModel, Field

from debt_planner.models.debt import Debt
from debt_planner.models.schedule import MonthSnapshot, Strategy


class PlannerSettings(BaseModel):
    """User-level plan inputs persisted next to the debt list."""
    strategy: Strategy = Strategy.avalanche
    extra_contribution: float = Field(default=5000.0, ge=0)


class SimulateRequest(BaseModel):
    """Request body for an inline simulation; no stored state required."""
    debts: list[Debt]
    strategy: Strategy = Strategy.avalanche
    extra_contribution: float = Field(default=0.0, ge=0)


class PayoffSummary(BaseModel):
    """Aggregate statistics over a payoff schedule."""
    total_months: int
    total_years: float
    total_interest: float
    total_paid: float
    total_minimum_payment: float
    total_monthly_outlay: float
    base_extra: float
    current_extra: float
    freed_extra: float
    all_paid: bool
    horizon_reached: bool


class PayoffPlan(BaseModel):
    """Schedule plus summary for one set of inputs."""
    strategy: Strategy
    extra_contribution: float
    schedule: list[MonthSnapshot]
    summary: PayoffSummary
    computed_at: datetime
