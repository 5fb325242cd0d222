from decimal import Decimal
from typing import Dict, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session

from shared.helpers.json_response_helper import error_response, not_found_response
from shared.utils.app_status_code import AppStatusCode
from ...models.leasing.leases import Lease
from ...models.properties.properties import Property
from ...schemas.properties.properties_schemas import (
    PropertyCreate, PropertyOut, PropertyUpdate,
)


# ----------------------------------------------------
# ✅ Build filters (holder scope + equality filters + text search)
# ----------------------------------------------------
def build_filters(holder_id: str, type: Optional[str] = None, building_id: Optional[str] = None, search: Optional[str] = None):
    filters = [Property.holder_id == holder_id]

    if type and type.lower() != "all":
        filters.append(Property.type == type)

    if building_id:
        filters.append(Property.building_id == building_id)

    if search:
        like = f"%{search}%"
        filters.append(
            or_(
                Property.name.ilike(like),
                Property.address.ilike(like),
                Property.code.ilike(like),
            )
        )

    return filters


def get_list(db: Session, holder_id: str, skip: int = 0, limit: int = 100, **filters) -> Dict:
    q = (
        db.query(Property)
        .filter(*build_filters(holder_id, **filters))
        .order_by(Property.code.asc())
    )

    total = q.count()
    rows = q.offset(skip).limit(limit).all()
    return {"properties": [PropertyOut.model_validate(r) for r in rows], "total": total}


def get_by_id(db: Session, holder_id: str, property_id: str) -> Optional[Property]:
    return (
        db.query(Property)
        .filter(Property.id == property_id, Property.holder_id == holder_id)
        .first()
    )


def get_property(db: Session, holder_id: str, property_id: str) -> PropertyOut:
    obj = get_by_id(db, holder_id, property_id)
    if not obj:
        return not_found_response("Property", property_id)
    return PropertyOut.model_validate(obj)


def create(db: Session, holder_id: str, payload: PropertyCreate) -> PropertyOut:
    data = payload.model_dump(exclude_unset=True)
    data.setdefault("is_published", False)

    obj = Property(holder_id=holder_id, **data)
    db.add(obj)
    db.commit()
    db.refresh(obj)
    return PropertyOut.model_validate(obj)


def update(db: Session, holder_id: str, property_id: str, payload: PropertyUpdate) -> PropertyOut:
    obj = get_by_id(db, holder_id, property_id)
    if not obj:
        return not_found_response("Property", property_id)

    for k, v in payload.model_dump(exclude_unset=True).items():
        setattr(obj, k, v)

    db.commit()
    db.refresh(obj)
    return PropertyOut.model_validate(obj)


def delete(db: Session, holder_id: str, property_id: str) -> Dict:
    obj = get_by_id(db, holder_id, property_id)
    if not obj:
        return not_found_response("Property", property_id)

    lease_count = (
        db.query(Lease)
        .filter(Lease.property_id == property_id, Lease.holder_id == holder_id)
        .count()
    )
    if lease_count:
        return error_response(
            message=f"Property {property_id} has {lease_count} lease(s) and cannot be deleted",
            status_code=AppStatusCode.OPERATION_ERROR,
            http_status=400
        )

    db.delete(obj)
    db.commit()
    return {"success": True}


# ----------------------------------------------------
# ✅ Public search over published properties of every holder
# ----------------------------------------------------
def search_public(
    db: Session,
    query: Optional[str] = None,
    operation_type: Optional[str] = None,
    min_price: Optional[Decimal] = None,
    max_price: Optional[Decimal] = None,
):
    q = db.query(Property).filter(Property.is_published == True)

    if operation_type:
        q = q.filter(Property.type == operation_type)

    # price filters only match properties that carry a rent
    if min_price is not None:
        q = q.filter(Property.base_monthly_rent.isnot(None),
                     Property.base_monthly_rent >= min_price)
    if max_price is not None:
        q = q.filter(Property.base_monthly_rent.isnot(None),
                     Property.base_monthly_rent <= max_price)

    if query:
        like = f"%{query}%"
        q = q.filter(
            or_(
                Property.name.ilike(like),
                Property.address.ilike(like),
                Property.code.ilike(like),
            )
        )

    rows = q.order_by(Property.base_monthly_rent.asc()).all()
    return [PropertyOut.model_validate(r) for r in rows]
