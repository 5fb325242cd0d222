from decimal import Decimal
from typing import Dict, List, Optional

from sqlalchemy.orm import Session

from shared.core.exceptions import ConsistencyViolationError, InvalidInputError, NotFoundError
from shared.core.schemas import Lookup
from shared.helpers.json_response_helper import not_found_response
from shared.utils.blob_storage import LocalBlobStorage
from ..common.attachment_crud import AttachmentService
from ...enum.leasing_enum import LeaseStatus, LeaseType
from ...enum.properties_enum import AttachmentModule
from ...models.leasing.landlords import Landlord
from ...models.leasing.leases import Lease
from ...models.leasing.tenants import Tenant
from ...models.properties.properties import Property
from ...schemas.leasing.leases_schemas import LeaseCreate, LeaseOut, LeaseUpdate

# largest accepted gap between net and gross minus bills
RENT_TOLERANCE = Decimal("0.01")

# fields a lease can never be left without, keyed to their wire names
REQUIRED_LEASE_FIELDS = {
    "type": "type",
    "property_id": "propertyId",
    "start_date": "startDate",
    "monthly_rent_without_bills": "monthlyRentWithoutBills",
}


def _check_rent_consistency(net, gross, bills):
    if net is None or gross is None or bills is None:
        return
    if abs(Decimal(net) - (Decimal(gross) - Decimal(bills))) > RENT_TOLERANCE:
        raise ConsistencyViolationError(
            "monthlyRentWithoutBills must equal monthlyRentWithBills minus billsIncludedAmount")


def _validate_lease(db: Session, holder_id: str, data: dict):
    """Cross-field rules shared by create and update. ``data`` is the full
    resulting lease, not only the fields the caller sent."""
    missing = [wire for name, wire in REQUIRED_LEASE_FIELDS.items()
               if data.get(name) is None]
    if missing:
        raise InvalidInputError(f"Lease fields cannot be empty: {', '.join(missing)}")

    lease_type = data.get("type")

    if lease_type == LeaseType.TENANT.value and not data.get("tenant_id"):
        raise InvalidInputError("tenantId is required for TENANT leases")
    if lease_type == LeaseType.LANDLORD.value and not data.get("landlord_id"):
        raise InvalidInputError("landlordId is required for LANDLORD leases")

    start_date, end_date = data.get("start_date"), data.get("end_date")
    if start_date and end_date and end_date < start_date:
        raise InvalidInputError("endDate must not be before startDate")

    _check_rent_consistency(
        data.get("monthly_rent_without_bills"),
        data.get("monthly_rent_with_bills"),
        data.get("bills_included_amount"),
    )

    prop = db.query(Property).filter(
        Property.id == data.get("property_id"), Property.holder_id == holder_id).first()
    if not prop:
        raise NotFoundError(f"Property {data.get('property_id')} not found")

    if data.get("tenant_id"):
        tenant = db.query(Tenant).filter(
            Tenant.id == data["tenant_id"], Tenant.holder_id == holder_id).first()
        if not tenant:
            raise NotFoundError(f"Tenant {data['tenant_id']} not found")

    if data.get("landlord_id"):
        landlord = db.query(Landlord).filter(
            Landlord.id == data["landlord_id"], Landlord.holder_id == holder_id).first()
        if not landlord:
            raise NotFoundError(f"Landlord {data['landlord_id']} not found")


def get_list(
    db: Session,
    holder_id: str,
    skip: int = 0,
    limit: int = 100,
    type: Optional[str] = None,
    property_id: Optional[str] = None,
    status: Optional[str] = None,
) -> Dict:
    q = db.query(Lease).filter(Lease.holder_id == holder_id)

    if type:
        q = q.filter(Lease.type == type)
    if property_id:
        q = q.filter(Lease.property_id == property_id)
    if status:
        q = q.filter(Lease.status == status)

    total = q.count()
    rows = q.order_by(Lease.start_date.desc()).offset(skip).limit(limit).all()
    return {"leases": [LeaseOut.model_validate(r) for r in rows], "total": total}


def get_by_id(db: Session, holder_id: str, lease_id: str) -> Optional[Lease]:
    return (
        db.query(Lease)
        .filter(Lease.id == lease_id, Lease.holder_id == holder_id)
        .first()
    )


def get_lease(db: Session, holder_id: str, lease_id: str) -> LeaseOut:
    obj = get_by_id(db, holder_id, lease_id)
    if not obj:
        return not_found_response("Lease", lease_id)
    return LeaseOut.model_validate(obj)


def create(db: Session, holder_id: str, payload: LeaseCreate) -> LeaseOut:
    data = payload.model_dump(exclude_unset=True)
    if not data.get("status"):
        data["status"] = LeaseStatus.ACTIVE.value

    _validate_lease(db, holder_id, data)

    obj = Lease(holder_id=holder_id, **data)
    db.add(obj)
    db.commit()
    db.refresh(obj)
    return LeaseOut.model_validate(obj)


def update(db: Session, holder_id: str, lease_id: str, payload: LeaseUpdate) -> LeaseOut:
    obj = get_by_id(db, holder_id, lease_id)
    if not obj:
        return not_found_response("Lease", lease_id)

    changes = payload.model_dump(exclude_unset=True)
    merged = {c.name: getattr(obj, c.name) for c in Lease.__table__.columns}
    merged.update(changes)
    _validate_lease(db, holder_id, merged)

    for k, v in changes.items():
        setattr(obj, k, v)

    db.commit()
    db.refresh(obj)
    return LeaseOut.model_validate(obj)


def delete(db: Session, storage: LocalBlobStorage, holder_id: str, lease_id: str) -> Dict:
    # generated payments and expenses stay in the ledger
    obj = get_by_id(db, holder_id, lease_id)
    if not obj:
        return not_found_response("Lease", lease_id)

    paths = AttachmentService.remove_all_for_entity(
        db, holder_id, AttachmentModule.leases, lease_id)
    db.delete(obj)
    db.commit()

    AttachmentService.delete_blobs(storage, paths)
    return {"success": True}


def lease_type_lookup() -> List[Lookup]:
    return [
        Lookup(id=lease_type.value, name=lease_type.name.capitalize())
        for lease_type in LeaseType
    ]


def lease_status_lookup() -> List[Lookup]:
    return [
        Lookup(id=status.value, name=status.name.capitalize())
        for status in LeaseStatus
    ]
