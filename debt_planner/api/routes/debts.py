from fastapi import APIRouter, Depends, HTTPException, Response

from debt_planner.api.deps import get_store
from debt_planner.db.store import DebtStore, StoreError
from debt_planner.models.debt import Debt, DebtCreate
from debt_planner.services.debt_service import DebtNotFoundError, add_debt, remove_debt

router = APIRouter(tags=["debts"])


def load_debts(store: DebtStore) -> list[Debt]:
    """Stored debt list, empty when nothing has been saved yet."""
    try:
        return store.load() or []
    except StoreError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/debts", response_model=list[Debt])
def list_debts(store: DebtStore = Depends(get_store)):
    return load_debts(store)


@router.post("/debts", response_model=Debt, status_code=201)
def create_debt(payload: DebtCreate, store: DebtStore = Depends(get_store)):
    """Add a debt; missing term and minimum payment are filled in."""
    debts, debt = add_debt(load_debts(store), payload)
    try:
        store.save(debts)
    except StoreError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return debt


@router.delete("/debts/{debt_id}", status_code=204)
def delete_debt(debt_id: int, store: DebtStore = Depends(get_store)):
    try:
        debts = remove_debt(load_debts(store), debt_id)
    except DebtNotFoundError:
        raise HTTPException(status_code=404, detail=f"Debt {debt_id} not found")
    try:
        store.save(debts)
    except StoreError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return Response(status_code=204)
