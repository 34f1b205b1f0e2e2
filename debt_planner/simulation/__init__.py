"""Simulation engine — payment calculator, strategy ordering, and payoff loop."""
from debt_planner.simulation.payment import (
    DEFAULT_TERM_MONTHS,
    compute_minimum_payment,
    resolve_minimum_payment,
)
from debt_planner.simulation.strategies import (
    StrategyParams,
    get_strategy,
    list_strategy_names,
    order_debts,
)
from debt_planner.simulation.engine import MAX_MONTHS, simulate

__all__ = [
    "DEFAULT_TERM_MONTHS",
    "MAX_MONTHS",
    "StrategyParams",
    "compute_minimum_payment",
    "get_strategy",
    "list_strategy_names",
    "order_debts",
    "resolve_minimum_payment",
    "simulate",
]
