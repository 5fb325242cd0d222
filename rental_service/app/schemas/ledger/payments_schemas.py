from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional
from pydantic import Field

from shared.wrappers.empty_string_model_wrapper import EmptyStringModel
from ...enum.ledger_enum import PaymentKind, PaymentStatus


class PaymentBase(EmptyStringModel):
    lease_id: Optional[str] = None
    tenant_id: Optional[str] = None
    property_id: Optional[str] = None
    building_id: Optional[str] = None
    due_date: Optional[date] = None
    paid_date: Optional[date] = None
    amount: Optional[Decimal] = Field(None, ge=0, max_digits=14, decimal_places=2)
    currency: Optional[str] = None
    kind: Optional[PaymentKind] = None
    status: Optional[PaymentStatus] = None
    notes: Optional[str] = None


class PaymentCreate(PaymentBase):
    lease_id: str
    tenant_id: str
    property_id: str
    due_date: date
    amount: Decimal = Field(..., ge=0, max_digits=14, decimal_places=2)
    kind: PaymentKind


class PaymentUpdate(PaymentBase):
    non_nullable = ("due_date", "amount", "currency", "kind", "status")


class PaymentOut(PaymentBase):
    id: str
    amount: Optional[float] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class PaymentListResponse(EmptyStringModel):
    payments: List[PaymentOut]
    total: int
