from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from shared.core.auth import allow_holder
from shared.core.database import get_db
from shared.core.schemas import DeleteResult, UserToken
from shared.utils.blob_storage import LocalBlobStorage, get_blob_storage
from ...crud.leasing import tenants_crud as crud
from ...schemas.leasing.tenants_schemas import (
    TenantCreate, TenantListResponse, TenantOut, TenantUpdate,
)

router = APIRouter(
    prefix="/api/tenants",
    tags=["tenants"],
    dependencies=[Depends(allow_holder)]
)


@router.get("/", response_model=TenantListResponse, response_model_exclude_none=True)
def get_tenants(
    status: Optional[str] = Query(None),
    search: Optional[str] = Query(None),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(allow_holder)
):
    return crud.get_list(db, current_user.scope_id, skip, limit,
                         status=status, search=search)


@router.get("/{tenant_id}", response_model=TenantOut, response_model_exclude_none=True)
def get_tenant(
    tenant_id: str,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(allow_holder)
):
    return crud.get_tenant(db, current_user.scope_id, tenant_id)


@router.post("/", response_model=TenantOut, response_model_exclude_none=True)
def create_tenant(
    payload: TenantCreate,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(allow_holder)
):
    return crud.create(db, current_user.scope_id, payload)


@router.patch("/{tenant_id}", response_model=TenantOut, response_model_exclude_none=True)
def update_tenant(
    tenant_id: str,
    payload: TenantUpdate,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(allow_holder)
):
    return crud.update(db, current_user.scope_id, tenant_id, payload)


@router.delete("/{tenant_id}", response_model=DeleteResult)
def delete_tenant(
    tenant_id: str,
    db: Session = Depends(get_db),
    storage: LocalBlobStorage = Depends(get_blob_storage),
    current_user: UserToken = Depends(allow_holder)
):
    return crud.delete(db, storage, current_user.scope_id, tenant_id)
