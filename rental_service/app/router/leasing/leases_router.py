from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from shared.core.auth import allow_holder
from shared.core.config import settings
from shared.core.database import get_db
from shared.core.schemas import DeleteResult, Lookup, UserToken
from shared.utils.blob_storage import LocalBlobStorage, get_blob_storage
from ...crud.leasing import leases_crud as crud
from ...crud.scheduler.schedule_service import generate_schedule
from ...enum.leasing_enum import LeaseStatus, LeaseType
from ...schemas.leasing.leases_schemas import (
    LeaseCreate, LeaseListResponse, LeaseOut, LeaseUpdate, ScheduleResult,
)

router = APIRouter(
    prefix="/api/leases",
    tags=["leases"],
    dependencies=[Depends(allow_holder)]
)


@router.get("/", response_model=LeaseListResponse, response_model_exclude_none=True)
def get_leases(
    type: Optional[LeaseType] = Query(None),
    property_id: Optional[str] = Query(None, alias="propertyId"),
    status: Optional[LeaseStatus] = Query(None),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(allow_holder)
):
    return crud.get_list(
        db, current_user.scope_id, skip, limit,
        type=type.value if type else None,
        property_id=property_id,
        status=status.value if status else None,
    )


@router.get("/type-lookup", response_model=List[Lookup])
def lease_type_lookup():
    return crud.lease_type_lookup()


@router.get("/status-lookup", response_model=List[Lookup])
def lease_status_lookup():
    return crud.lease_status_lookup()


@router.get("/{lease_id}", response_model=LeaseOut, response_model_exclude_none=True)
def get_lease(
    lease_id: str,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(allow_holder)
):
    return crud.get_lease(db, current_user.scope_id, lease_id)


@router.post("/", response_model=LeaseOut, response_model_exclude_none=True)
def create_lease(
    payload: LeaseCreate,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(allow_holder)
):
    return crud.create(db, current_user.scope_id, payload)


@router.patch("/{lease_id}", response_model=LeaseOut, response_model_exclude_none=True)
def update_lease(
    lease_id: str,
    payload: LeaseUpdate,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(allow_holder)
):
    return crud.update(db, current_user.scope_id, lease_id, payload)


@router.delete("/{lease_id}", response_model=DeleteResult)
def delete_lease(
    lease_id: str,
    db: Session = Depends(get_db),
    storage: LocalBlobStorage = Depends(get_blob_storage),
    current_user: UserToken = Depends(allow_holder)
):
    return crud.delete(db, storage, current_user.scope_id, lease_id)


@router.post("/{lease_id}/generate-schedule", response_model=ScheduleResult)
def generate_lease_schedule(
    lease_id: str,
    months_if_no_end: int = Query(settings.SCHEDULE_MONTHS_IF_NO_END, alias="monthsIfNoEnd", ge=1),
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(allow_holder)
):
    return generate_schedule(db, current_user.scope_id, lease_id, months_if_no_end)
