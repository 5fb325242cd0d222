from typing import Dict, Optional

from sqlalchemy.orm import Session

from shared.core.config import settings
from shared.helpers.json_response_helper import not_found_response
from shared.utils.blob_storage import LocalBlobStorage
from ..common.attachment_crud import AttachmentService
from ...enum.ledger_enum import PaymentStatus
from ...enum.properties_enum import AttachmentModule
from ...models.ledger.payments import Payment
from ...schemas.ledger.payments_schemas import PaymentCreate, PaymentOut, PaymentUpdate


def get_list(
    db: Session,
    holder_id: str,
    skip: int = 0,
    limit: int = 100,
    lease_id: Optional[str] = None,
    status: Optional[str] = None,
    kind: Optional[str] = None,
) -> Dict:
    q = db.query(Payment).filter(Payment.holder_id == holder_id)

    if lease_id:
        q = q.filter(Payment.lease_id == lease_id)
    if status:
        q = q.filter(Payment.status == status)
    if kind:
        q = q.filter(Payment.kind == kind)

    total = q.count()
    rows = q.order_by(Payment.due_date.asc()).offset(skip).limit(limit).all()
    return {"payments": [PaymentOut.model_validate(r) for r in rows], "total": total}


def get_by_id(db: Session, holder_id: str, payment_id: str) -> Optional[Payment]:
    return (
        db.query(Payment)
        .filter(Payment.id == payment_id, Payment.holder_id == holder_id)
        .first()
    )


def get_payment(db: Session, holder_id: str, payment_id: str) -> PaymentOut:
    obj = get_by_id(db, holder_id, payment_id)
    if not obj:
        return not_found_response("Payment", payment_id)
    return PaymentOut.model_validate(obj)


def create(db: Session, holder_id: str, payload: PaymentCreate) -> PaymentOut:
    data = payload.model_dump(exclude_unset=True)
    data["currency"] = data.get("currency") or settings.DEFAULT_CURRENCY
    data["status"] = data.get("status") or PaymentStatus.PLANNED.value

    obj = Payment(holder_id=holder_id, **data)
    db.add(obj)
    db.commit()
    db.refresh(obj)
    return PaymentOut.model_validate(obj)


def update(db: Session, holder_id: str, payment_id: str, payload: PaymentUpdate) -> PaymentOut:
    obj = get_by_id(db, holder_id, payment_id)
    if not obj:
        return not_found_response("Payment", payment_id)

    for k, v in payload.model_dump(exclude_unset=True).items():
        setattr(obj, k, v)

    db.commit()
    db.refresh(obj)
    return PaymentOut.model_validate(obj)


def delete(db: Session, storage: LocalBlobStorage, holder_id: str, payment_id: str) -> Dict:
    obj = get_by_id(db, holder_id, payment_id)
    if not obj:
        return not_found_response("Payment", payment_id)

    paths = AttachmentService.remove_all_for_entity(
        db, holder_id, AttachmentModule.payments, payment_id)
    db.delete(obj)
    db.commit()

    AttachmentService.delete_blobs(storage, paths)
    return {"success": True}
