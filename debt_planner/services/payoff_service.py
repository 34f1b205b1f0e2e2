"""Payoff plan orchestration service.

Runs the simulator for one set of inputs and aggregates the schedule into
the dashboard figures: total term, total interest, total cost, and the
effective extra contribution after freed minimum payments.
"""
from __future__ import annotations

import logging
import threading
from datetime import datetime, timezone

from debt_planner.config import settings
from debt_planner.models.debt import Debt
from debt_planner.models.plan import PayoffPlan, PayoffSummary, PlannerSettings
from debt_planner.models.schedule import PayoffResult, Strategy
from debt_planner.simulation.engine import MAX_MONTHS, simulate
from debt_planner.simulation.payment import resolve_minimum_payment

logger = logging.getLogger(__name__)


def default_planner_settings() -> PlannerSettings:
    """Planner settings used before the user has saved any."""
    return PlannerSettings(
        strategy=Strategy(settings.DEFAULT_STRATEGY),
        extra_contribution=settings.DEFAULT_EXTRA_CONTRIBUTION,
    )


def summarize_schedule(
    debts: list[Debt],
    result: PayoffResult,
    extra_contribution: float,
) -> PayoffSummary:
    """Aggregate a simulation result into summary statistics.

    - total_paid = total interest + the debts' current principal
    - horizon_reached flags a run cut off at MAX_MONTHS with debt outstanding
    """
    schedule = result.schedule
    total_months = len(schedule)
    total_interest = sum(
        state.interest_paid for snapshot in schedule for state in snapshot.debts
    )
    principal = sum(debt.amount for debt in debts)
    total_minimum = sum(resolve_minimum_payment(debt) for debt in debts)

    all_paid = True
    if schedule:
        all_paid = all(state.remaining_amount <= 0 for state in schedule[-1].debts)

    current_extra = result.final_effective_extra
    return PayoffSummary(
        total_months=total_months,
        total_years=round(total_months / 12.0, 1),
        total_interest=round(total_interest, 2),
        total_paid=round(total_interest + principal, 2),
        total_minimum_payment=round(total_minimum, 2),
        total_monthly_outlay=round(total_minimum + extra_contribution, 2),
        base_extra=extra_contribution,
        current_extra=round(current_extra, 2),
        freed_extra=round(current_extra - extra_contribution, 2),
        all_paid=all_paid,
        horizon_reached=total_months == MAX_MONTHS and not all_paid,
    )


def build_payoff_plan(
    debts: list[Debt],
    strategy: Strategy | str,
    extra_contribution: float,
) -> PayoffPlan:
    """Simulate and summarize one set of inputs."""
    strategy = Strategy(strategy)
    result = simulate(debts, strategy, extra_contribution)
    summary = summarize_schedule(debts, result, extra_contribution)
    logger.info(
        "Payoff plan (%s, extra=%.2f, %d debts): %d months, interest %.2f",
        strategy.value, extra_contribution, len(debts),
        summary.total_months, summary.total_interest,
    )
    return PayoffPlan(
        strategy=strategy,
        extra_contribution=extra_contribution,
        schedule=result.schedule,
        summary=summary,
        computed_at=datetime.now(timezone.utc),
    )


class PlanPublisher:
    """Keeps the result of the most recently started run that has completed.

    Every run takes a ticket when it starts. A finished run is published
    only if no newer run has already been published; otherwise its result
    is stale and dropped.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._next_ticket = 0
        self._published_ticket = -1
        self._latest: PayoffPlan | None = None

    def begin(self) -> int:
        with self._lock:
            ticket = self._next_ticket
            self._next_ticket += 1
            return ticket

    def publish(self, ticket: int, plan: PayoffPlan) -> bool:
        """Publish ``plan`` unless a newer run got there first."""
        with self._lock:
            if ticket <= self._published_ticket:
                logger.debug(
                    "Discarding stale plan run %d (published: %d)",
                    ticket, self._published_ticket,
                )
                return False
            self._published_ticket = ticket
            self._latest = plan
            return True

    def latest(self) -> PayoffPlan | None:
        with self._lock:
            return self._latest

    def run(
        self,
        debts: list[Debt],
        strategy: Strategy | str,
        extra_contribution: float,
    ) -> PayoffPlan:
        """Build a plan and return whatever is current once it completes."""
        ticket = self.begin()
        plan = build_payoff_plan(debts, strategy, extra_contribution)
        self.publish(ticket, plan)
        return self.latest() or plan

    def reset(self) -> None:
        with self._lock:
            self._next_ticket = 0
            self._published_ticket = -1
            self._latest = None


plan_publisher = PlanPublisher()
