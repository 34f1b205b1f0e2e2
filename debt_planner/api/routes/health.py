from fastapi import APIRouter

from debt_planner.db.store import debt_store

router = APIRouter(tags=["health"])


@router.get("/health")
def health_check():
    return {
        "status": "ok",
        "store": debt_store.status(),
    }
