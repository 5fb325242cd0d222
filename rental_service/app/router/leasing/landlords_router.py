from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from shared.core.auth import allow_holder
from shared.core.database import get_db
from shared.core.schemas import DeleteResult, UserToken
from shared.utils.blob_storage import LocalBlobStorage, get_blob_storage
from ...crud.leasing import landlords_crud as crud
from ...schemas.leasing.landlords_schemas import (
    LandlordCreate, LandlordListResponse, LandlordOut, LandlordUpdate,
)

router = APIRouter(
    prefix="/api/landlords",
    tags=["landlords"],
    dependencies=[Depends(allow_holder)]
)


@router.get("/", response_model=LandlordListResponse, response_model_exclude_none=True)
def get_landlords(
    search: Optional[str] = Query(None),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(allow_holder)
):
    return crud.get_list(db, current_user.scope_id, skip, limit, search=search)


@router.get("/{landlord_id}", response_model=LandlordOut, response_model_exclude_none=True)
def get_landlord(
    landlord_id: str,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(allow_holder)
):
    return crud.get_landlord(db, current_user.scope_id, landlord_id)


@router.post("/", response_model=LandlordOut, response_model_exclude_none=True)
def create_landlord(
    payload: LandlordCreate,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(allow_holder)
):
    return crud.create(db, current_user.scope_id, payload)


@router.patch("/{landlord_id}", response_model=LandlordOut, response_model_exclude_none=True)
def update_landlord(
    landlord_id: str,
    payload: LandlordUpdate,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(allow_holder)
):
    return crud.update(db, current_user.scope_id, landlord_id, payload)


@router.delete("/{landlord_id}", response_model=DeleteResult)
def delete_landlord(
    landlord_id: str,
    db: Session = Depends(get_db),
    storage: LocalBlobStorage = Depends(get_blob_storage),
    current_user: UserToken = Depends(allow_holder)
):
    return crud.delete(db, storage, current_user.scope_id, landlord_id)
