import logging
from datetime import datetime, timezone

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from shared.core.config import settings
from shared.core.exceptions import NotFoundError, StoreFailureError
from ...enum.leasing_enum import LeaseType
from ...enum.ledger_enum import (
    AllocationMode, ExpenseFrequency, ExpenseScope, PaymentKind, PaymentStatus, RENT_TO_LANDLORD,
)
from ...models.leasing.leases import Lease
from ...models.ledger.expenses import Expense
from ...models.ledger.payments import Payment
from ...models.properties.properties import Property
from .lease_schedule import ScheduleEntry, plan_schedule, schedule_note

logger = logging.getLogger(__name__)


def _payment_row(holder_id: str, lease: Lease, building_id, entry: ScheduleEntry, now: datetime) -> Payment:
    return Payment(
        holder_id=holder_id,
        lease_id=lease.id,
        tenant_id=lease.tenant_id,
        property_id=lease.property_id,
        building_id=building_id,
        due_date=entry.due_date,
        amount=entry.amount,
        currency=settings.DEFAULT_CURRENCY,
        kind=PaymentKind.RENT.value,
        status=PaymentStatus.PLANNED.value,
        notes=schedule_note(entry.period),
        created_at=now,
        updated_at=now,
    )


def _expense_row(holder_id: str, lease: Lease, entry: ScheduleEntry, now: datetime) -> Expense:
    return Expense(
        holder_id=holder_id,
        lease_id=lease.id,
        property_id=lease.property_id,
        landlord_id=lease.landlord_id,
        type=RENT_TO_LANDLORD,
        amount=entry.amount,
        currency=settings.DEFAULT_CURRENCY,
        cost_date=entry.due_date,
        cost_month=entry.period,
        frequency=ExpenseFrequency.MONTHLY.value,
        scope=ExpenseScope.UNIT.value,
        allocation_mode=AllocationMode.NONE.value,
        status=PaymentStatus.PLANNED.value,
        notes=schedule_note(entry.period),
        created_at=now,
        updated_at=now,
    )


def generate_schedule(db: Session, holder_id: str, lease_id: str, months_if_no_end: int = settings.SCHEDULE_MONTHS_IF_NO_END) -> dict:
    """Write one payment (tenant lease) or expense (landlord lease) per month.

    All rows go out in a single commit. Nothing is written when a check
    fails, and a failed commit is rolled back whole. Running it twice for the
    same lease writes the months twice.
    """
    lease = db.query(Lease).filter(
        Lease.id == lease_id, Lease.holder_id == holder_id).first()
    if not lease:
        raise NotFoundError(f"Lease {lease_id} not found")

    prop = db.query(Property).filter(
        Property.id == lease.property_id, Property.holder_id == holder_id).first()
    if not prop:
        raise NotFoundError(f"Property {lease.property_id} not found")

    entries = plan_schedule(lease, months_if_no_end)

    now = datetime.now(timezone.utc)
    if lease.type == LeaseType.TENANT.value:
        building_id = prop.building_id or lease.building_id
        rows = [_payment_row(holder_id, lease, building_id, e, now)
                for e in entries]
    else:
        rows = [_expense_row(holder_id, lease, e, now) for e in entries]

    try:
        db.add_all(rows)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Schedule write failed for lease %s", lease_id)
        raise StoreFailureError(
            f"Could not store schedule for lease {lease_id}") from e

    logger.info("Generated %d %s records for lease %s (holder %s)",
                len(rows), "payment" if lease.type == LeaseType.TENANT.value else "expense",
                lease_id, holder_id)
    return {"generated": len(rows)}
