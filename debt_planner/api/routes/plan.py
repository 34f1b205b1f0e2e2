from fastapi import APIRouter, Depends

from debt_planner.api.deps import get_store
from debt_planner.api.routes.debts import load_debts
from debt_planner.api.routes.planner_settings import load_planner_settings
from debt_planner.db.store import DebtStore
from debt_planner.models.plan import PayoffPlan, SimulateRequest
from debt_planner.services.payoff_service import build_payoff_plan, plan_publisher
from debt_planner.simulation.strategies import get_strategy, list_strategy_names

router = APIRouter(tags=["plan"])


@router.get("/strategies")
def get_strategies():
    return [
        {"name": name, "description": get_strategy(name).description}
        for name in list_strategy_names()
    ]


@router.get("/plan", response_model=PayoffPlan)
def get_plan(store: DebtStore = Depends(get_store)):
    """Payoff plan for the stored debts and settings, recomputed on every call."""
    debts = load_debts(store)
    planner_settings = load_planner_settings(store)
    return plan_publisher.run(
        debts, planner_settings.strategy, planner_settings.extra_contribution
    )


@router.post("/plan/simulate", response_model=PayoffPlan)
def simulate_plan(request: SimulateRequest):
    """Run a payoff plan on an inline debt list. Nothing is stored."""
    return build_payoff_plan(request.debts, request.strategy, request.extra_contribution)
