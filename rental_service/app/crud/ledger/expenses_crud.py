from datetime import date
from typing import Dict, Optional

from sqlalchemy.orm import Session

from shared.core.config import settings
from shared.helpers.json_response_helper import not_found_response
from shared.utils.blob_storage import LocalBlobStorage
from ..common.attachment_crud import AttachmentService
from ...enum.properties_enum import AttachmentModule
from ...models.ledger.expenses import Expense
from ...schemas.ledger.expenses_schemas import ExpenseCreate, ExpenseOut, ExpenseUpdate


def cost_month_of(cost_date: Optional[date]) -> Optional[str]:
    if cost_date is None:
        return None
    return f"{cost_date.year:04d}-{cost_date.month:02d}"


def get_list(
    db: Session,
    holder_id: str,
    skip: int = 0,
    limit: int = 100,
    lease_id: Optional[str] = None,
    property_id: Optional[str] = None,
) -> Dict:
    q = db.query(Expense).filter(Expense.holder_id == holder_id)

    if lease_id:
        q = q.filter(Expense.lease_id == lease_id)
    if property_id:
        q = q.filter(Expense.property_id == property_id)

    total = q.count()
    rows = q.order_by(Expense.cost_date.asc()).offset(skip).limit(limit).all()
    return {"expenses": [ExpenseOut.model_validate(r) for r in rows], "total": total}


def get_by_id(db: Session, holder_id: str, expense_id: str) -> Optional[Expense]:
    return (
        db.query(Expense)
        .filter(Expense.id == expense_id, Expense.holder_id == holder_id)
        .first()
    )


def get_expense(db: Session, holder_id: str, expense_id: str) -> ExpenseOut:
    obj = get_by_id(db, holder_id, expense_id)
    if not obj:
        return not_found_response("Expense", expense_id)
    return ExpenseOut.model_validate(obj)


def create(db: Session, holder_id: str, payload: ExpenseCreate) -> ExpenseOut:
    data = payload.model_dump(exclude_unset=True)
    data["currency"] = data.get("currency") or settings.DEFAULT_CURRENCY
    if not data.get("cost_month"):
        data["cost_month"] = cost_month_of(data.get("cost_date"))

    obj = Expense(holder_id=holder_id, **data)
    db.add(obj)
    db.commit()
    db.refresh(obj)
    return ExpenseOut.model_validate(obj)


def update(db: Session, holder_id: str, expense_id: str, payload: ExpenseUpdate) -> ExpenseOut:
    obj = get_by_id(db, holder_id, expense_id)
    if not obj:
        return not_found_response("Expense", expense_id)

    changes = payload.model_dump(exclude_unset=True)
    # keep the month in step with a moved cost date unless it was sent too
    if changes.get("cost_date") and "cost_month" not in changes:
        changes["cost_month"] = cost_month_of(changes["cost_date"])

    for k, v in changes.items():
        setattr(obj, k, v)

    db.commit()
    db.refresh(obj)
    return ExpenseOut.model_validate(obj)


def delete(db: Session, storage: LocalBlobStorage, holder_id: str, expense_id: str) -> Dict:
    obj = get_by_id(db, holder_id, expense_id)
    if not obj:
        return not_found_response("Expense", expense_id)

    paths = AttachmentService.remove_all_for_entity(
        db, holder_id, AttachmentModule.expenses, expense_id)
    db.delete(obj)
    db.commit()

    AttachmentService.delete_blobs(storage, paths)
    return {"success": True}
