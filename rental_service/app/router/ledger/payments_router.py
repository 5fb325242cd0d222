from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from shared.core.auth import allow_holder
from shared.core.database import get_db
from shared.core.schemas import DeleteResult, UserToken
from shared.utils.blob_storage import LocalBlobStorage, get_blob_storage
from ...crud.ledger import payments_crud as crud
from ...enum.ledger_enum import PaymentKind, PaymentStatus
from ...schemas.ledger.payments_schemas import (
    PaymentCreate, PaymentListResponse, PaymentOut, PaymentUpdate,
)

router = APIRouter(
    prefix="/api/payments",
    tags=["payments"],
    dependencies=[Depends(allow_holder)]
)


@router.get("/", response_model=PaymentListResponse, response_model_exclude_none=True)
def get_payments(
    lease_id: Optional[str] = Query(None, alias="leaseId"),
    status: Optional[PaymentStatus] = Query(None),
    kind: Optional[PaymentKind] = Query(None),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(allow_holder)
):
    return crud.get_list(
        db, current_user.scope_id, skip, limit,
        lease_id=lease_id,
        status=status.value if status else None,
        kind=kind.value if kind else None,
    )


@router.get("/{payment_id}", response_model=PaymentOut, response_model_exclude_none=True)
def get_payment(
    payment_id: str,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(allow_holder)
):
    return crud.get_payment(db, current_user.scope_id, payment_id)


@router.post("/", response_model=PaymentOut, response_model_exclude_none=True)
def create_payment(
    payload: PaymentCreate,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(allow_holder)
):
    return crud.create(db, current_user.scope_id, payload)


@router.patch("/{payment_id}", response_model=PaymentOut, response_model_exclude_none=True)
def update_payment(
    payment_id: str,
    payload: PaymentUpdate,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(allow_holder)
):
    return crud.update(db, current_user.scope_id, payment_id, payload)


@router.delete("/{payment_id}", response_model=DeleteResult)
def delete_payment(
    payment_id: str,
    db: Session = Depends(get_db),
    storage: LocalBlobStorage = Depends(get_blob_storage),
    current_user: UserToken = Depends(allow_holder)
):
    return crud.delete(db, storage, current_user.scope_id, payment_id)
