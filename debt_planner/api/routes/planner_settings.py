from fastapi import APIRouter, Depends, HTTPException

from debt_planner.api.deps import get_store
from debt_planner.db.store import DebtStore, StoreError
from debt_planner.models.plan import PlannerSettings
from debt_planner.services.payoff_service import default_planner_settings

router = APIRouter(tags=["settings"])


def load_planner_settings(store: DebtStore) -> PlannerSettings:
    try:
        return store.load_settings() or default_planner_settings()
    except StoreError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/settings", response_model=PlannerSettings)
def get_planner_settings(store: DebtStore = Depends(get_store)):
    return load_planner_settings(store)


@router.put("/settings", response_model=PlannerSettings)
def update_planner_settings(payload: PlannerSettings, store: DebtStore = Depends(get_store)):
    """Replace the stored strategy and extra contribution."""
    try:
        store.save_settings(payload)
    except StoreError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return payload
