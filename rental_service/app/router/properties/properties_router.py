from decimal import Decimal
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from shared.core.auth import allow_holder
from shared.core.database import get_db
from shared.core.schemas import DeleteResult, UserToken
from ...crud.properties import properties_crud as crud
from ...schemas.properties.properties_schemas import (
    PropertyCreate, PropertyListResponse, PropertyOut, PropertyUpdate,
)

router = APIRouter(prefix="/api/properties", tags=["properties"])


# public listing page: no token, published rows only
@router.get("/search", response_model=List[PropertyOut], response_model_exclude_none=True)
def search_properties(
    query: Optional[str] = Query(None),
    operation_type: Optional[str] = Query(None, alias="operationType"),
    min_price: Optional[Decimal] = Query(None, alias="minPrice", ge=0),
    max_price: Optional[Decimal] = Query(None, alias="maxPrice", ge=0),
    db: Session = Depends(get_db)
):
    return crud.search_public(db, query, operation_type, min_price, max_price)


@router.get("/", response_model=PropertyListResponse, response_model_exclude_none=True)
def get_properties(
    type: Optional[str] = Query(None),
    building_id: Optional[str] = Query(None, alias="buildingId"),
    search: Optional[str] = Query(None),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(allow_holder)
):
    return crud.get_list(db, current_user.scope_id, skip, limit,
                         type=type, building_id=building_id, search=search)


@router.get("/{property_id}", response_model=PropertyOut, response_model_exclude_none=True)
def get_property(
    property_id: str,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(allow_holder)
):
    return crud.get_property(db, current_user.scope_id, property_id)


@router.post("/", response_model=PropertyOut, response_model_exclude_none=True)
def create_property(
    payload: PropertyCreate,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(allow_holder)
):
    return crud.create(db, current_user.scope_id, payload)


@router.patch("/{property_id}", response_model=PropertyOut, response_model_exclude_none=True)
def update_property(
    property_id: str,
    payload: PropertyUpdate,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(allow_holder)
):
    return crud.update(db, current_user.scope_id, property_id, payload)


@router.delete("/{property_id}", response_model=DeleteResult)
def delete_property(
    property_id: str,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(allow_holder)
):
    return crud.delete(db, current_user.scope_id, property_id)
