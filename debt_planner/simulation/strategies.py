"""Strategy definitions — named orderings for the extra-payment waterfall.

Each strategy sorts the working debt list once, before the first month.
The order is never revisited as balances shrink.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from debt_planner.models.debt import Debt
from debt_planner.models.schedule import Strategy


@dataclass(frozen=True)
class StrategyParams:
    """Sort rule for a single payoff strategy."""
    name: str
    description: str
    sort_key: Callable[[Debt], float]
    descending: bool


_STRATEGIES: dict[str, StrategyParams] = {
    Strategy.avalanche.value: StrategyParams(
        name=Strategy.avalanche.value,
        description="Highest interest rate first",
        sort_key=lambda debt: debt.interest_rate,
        descending=True,
    ),
    Strategy.snowball.value: StrategyParams(
        name=Strategy.snowball.value,
        description="Smallest balance first",
        sort_key=lambda debt: debt.amount,
        descending=False,
    ),
}


def get_strategy(name: Strategy | str) -> StrategyParams:
    """Return strategy parameters by name. Raises ValueError if unknown."""
    key = name.value if isinstance(name, Strategy) else str(name)
    try:
        return _STRATEGIES[key]
    except KeyError:
        raise ValueError(f"Invalid debt payoff strategy: {key!r}") from None


def list_strategy_names() -> list[str]:
    """Return all available strategy names."""
    return list(_STRATEGIES.keys())


def order_debts(debts: list[Debt], strategy: Strategy | str) -> list[Debt]:
    """Return a new list sorted for the strategy. Ties keep their input order."""
    params = get_strategy(strategy)
    # sorted() stays stable with reverse=True
    return sorted(debts, key=params.sort_key, reverse=params.descending)
