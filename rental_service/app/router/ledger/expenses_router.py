from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from shared.core.auth import allow_holder
from shared.core.database import get_db
from shared.core.schemas import DeleteResult, UserToken
from shared.utils.blob_storage import LocalBlobStorage, get_blob_storage
from ...crud.ledger import expenses_crud as crud
from ...schemas.ledger.expenses_schemas import (
    ExpenseCreate, ExpenseListResponse, ExpenseOut, ExpenseUpdate,
)

router = APIRouter(
    prefix="/api/expenses",
    tags=["expenses"],
    dependencies=[Depends(allow_holder)]
)


@router.get("/", response_model=ExpenseListResponse, response_model_exclude_none=True)
def get_expenses(
    lease_id: Optional[str] = Query(None, alias="leaseId"),
    property_id: Optional[str] = Query(None, alias="propertyId"),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(allow_holder)
):
    return crud.get_list(db, current_user.scope_id, skip, limit,
                         lease_id=lease_id, property_id=property_id)


@router.get("/{expense_id}", response_model=ExpenseOut, response_model_exclude_none=True)
def get_expense(
    expense_id: str,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(allow_holder)
):
    return crud.get_expense(db, current_user.scope_id, expense_id)


@router.post("/", response_model=ExpenseOut, response_model_exclude_none=True)
def create_expense(
    payload: ExpenseCreate,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(allow_holder)
):
    return crud.create(db, current_user.scope_id, payload)


@router.patch("/{expense_id}", response_model=ExpenseOut, response_model_exclude_none=True)
def update_expense(
    expense_id: str,
    payload: ExpenseUpdate,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(allow_holder)
):
    return crud.update(db, current_user.scope_id, expense_id, payload)


@router.delete("/{expense_id}", response_model=DeleteResult)
def delete_expense(
    expense_id: str,
    db: Session = Depends(get_db),
    storage: LocalBlobStorage = Depends(get_blob_storage),
    current_user: UserToken = Depends(allow_holder)
):
    return crud.delete(db, storage, current_user.scope_id, expense_id)
