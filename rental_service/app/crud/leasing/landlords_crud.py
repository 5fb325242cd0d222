from typing import Dict, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session

from shared.helpers.json_response_helper import error_response, not_found_response
from shared.utils.app_status_code import AppStatusCode
from shared.utils.blob_storage import LocalBlobStorage
from ..common.attachment_crud import AttachmentService
from ...enum.properties_enum import AttachmentModule
from ...models.leasing.landlords import Landlord
from ...models.leasing.leases import Lease
from ...schemas.leasing.landlords_schemas import LandlordCreate, LandlordOut, LandlordUpdate


def get_list(db: Session, holder_id: str, skip: int = 0, limit: int = 100, search: Optional[str] = None) -> Dict:
    q = db.query(Landlord).filter(Landlord.holder_id == holder_id)

    if search:
        like = f"%{search}%"
        q = q.filter(or_(Landlord.name.ilike(like),
                         Landlord.email.ilike(like),
                         Landlord.external_id.ilike(like)))

    total = q.count()
    rows = q.order_by(Landlord.name.asc()).offset(skip).limit(limit).all()
    return {"landlords": [LandlordOut.model_validate(r) for r in rows], "total": total}


def get_by_id(db: Session, holder_id: str, landlord_id: str) -> Optional[Landlord]:
    return (
        db.query(Landlord)
        .filter(Landlord.id == landlord_id, Landlord.holder_id == holder_id)
        .first()
    )


def get_landlord(db: Session, holder_id: str, landlord_id: str) -> LandlordOut:
    obj = get_by_id(db, holder_id, landlord_id)
    if not obj:
        return not_found_response("Landlord", landlord_id)
    return LandlordOut.model_validate(obj)


def create(db: Session, holder_id: str, payload: LandlordCreate) -> LandlordOut:
    obj = Landlord(holder_id=holder_id, **payload.model_dump(exclude_unset=True))
    db.add(obj)
    db.commit()
    db.refresh(obj)
    return LandlordOut.model_validate(obj)


def update(db: Session, holder_id: str, landlord_id: str, payload: LandlordUpdate) -> LandlordOut:
    obj = get_by_id(db, holder_id, landlord_id)
    if not obj:
        return not_found_response("Landlord", landlord_id)

    for k, v in payload.model_dump(exclude_unset=True).items():
        setattr(obj, k, v)

    db.commit()
    db.refresh(obj)
    return LandlordOut.model_validate(obj)


def delete(db: Session, storage: LocalBlobStorage, holder_id: str, landlord_id: str) -> Dict:
    obj = get_by_id(db, holder_id, landlord_id)
    if not obj:
        return not_found_response("Landlord", landlord_id)

    if db.query(Lease).filter(Lease.landlord_id == landlord_id).count():
        return error_response(
            message=f"Landlord {landlord_id} still has leases and cannot be deleted",
            status_code=AppStatusCode.OPERATION_ERROR,
            http_status=400
        )

    paths = AttachmentService.remove_all_for_entity(
        db, holder_id, AttachmentModule.landlords, landlord_id)
    db.delete(obj)
    db.commit()

    AttachmentService.delete_blobs(storage, paths)
    return {"success": True}
