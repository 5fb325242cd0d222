from typing import Dict, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session

from shared.helpers.json_response_helper import error_response, not_found_response
from shared.utils.app_status_code import AppStatusCode
from shared.utils.blob_storage import LocalBlobStorage
from ..common.attachment_crud import AttachmentService
from ...enum.properties_enum import AttachmentModule
from ...models.leasing.leases import Lease
from ...models.leasing.tenants import Tenant
from ...schemas.leasing.tenants_schemas import TenantCreate, TenantOut, TenantUpdate


def build_filters(holder_id: str, status: Optional[str] = None, search: Optional[str] = None):
    filters = [Tenant.holder_id == holder_id]

    if status and status.lower() != "all":
        filters.append(Tenant.status == status)

    # ✅ Search by name, email or phone
    if search:
        like = f"%{search}%"
        filters.append(
            or_(
                Tenant.first_name.ilike(like),
                Tenant.last_name.ilike(like),
                Tenant.email.ilike(like),
                Tenant.phone.ilike(like),
            )
        )

    return filters


def get_list(db: Session, holder_id: str, skip: int = 0, limit: int = 100, **filters) -> Dict:
    q = (
        db.query(Tenant)
        .filter(*build_filters(holder_id, **filters))
        .order_by(Tenant.last_name.asc(), Tenant.first_name.asc())
    )

    total = q.count()
    rows = q.offset(skip).limit(limit).all()
    return {"tenants": [TenantOut.model_validate(r) for r in rows], "total": total}


def get_by_id(db: Session, holder_id: str, tenant_id: str) -> Optional[Tenant]:
    return (
        db.query(Tenant)
        .filter(Tenant.id == tenant_id, Tenant.holder_id == holder_id)
        .first()
    )


def get_tenant(db: Session, holder_id: str, tenant_id: str) -> TenantOut:
    obj = get_by_id(db, holder_id, tenant_id)
    if not obj:
        return not_found_response("Tenant", tenant_id)
    return TenantOut.model_validate(obj)


def create(db: Session, holder_id: str, payload: TenantCreate) -> TenantOut:
    obj = Tenant(holder_id=holder_id, **payload.model_dump(exclude_unset=True))
    db.add(obj)
    db.commit()
    db.refresh(obj)
    return TenantOut.model_validate(obj)


def update(db: Session, holder_id: str, tenant_id: str, payload: TenantUpdate) -> TenantOut:
    obj = get_by_id(db, holder_id, tenant_id)
    if not obj:
        return not_found_response("Tenant", tenant_id)

    for k, v in payload.model_dump(exclude_unset=True).items():
        setattr(obj, k, v)

    db.commit()
    db.refresh(obj)
    return TenantOut.model_validate(obj)


def delete(db: Session, storage: LocalBlobStorage, holder_id: str, tenant_id: str) -> Dict:
    obj = get_by_id(db, holder_id, tenant_id)
    if not obj:
        return not_found_response("Tenant", tenant_id)

    if db.query(Lease).filter(Lease.tenant_id == tenant_id).count():
        return error_response(
            message=f"Tenant {tenant_id} still has leases and cannot be deleted",
            status_code=AppStatusCode.OPERATION_ERROR,
            http_status=400
        )

    paths = AttachmentService.remove_all_for_entity(
        db, holder_id, AttachmentModule.tenants, tenant_id)
    db.delete(obj)
    db.commit()

    AttachmentService.delete_blobs(storage, paths)
    return {"success": True}
