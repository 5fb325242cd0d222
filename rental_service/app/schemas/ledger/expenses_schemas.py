from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional
from pydantic import Field

from shared.wrappers.empty_string_model_wrapper import EmptyStringModel
from ...enum.ledger_enum import AllocationMode, ExpenseFrequency, ExpenseScope

COST_MONTH_PATTERN = r"^\d{4}-(0[1-9]|1[0-2])$"


class ExpenseBase(EmptyStringModel):
    lease_id: Optional[str] = None
    property_id: Optional[str] = None
    landlord_id: Optional[str] = None
    type: Optional[str] = None             # e.g. cleaning, maintenance
    description: Optional[str] = None
    amount: Optional[Decimal] = Field(None, ge=0, max_digits=14, decimal_places=2)
    currency: Optional[str] = None
    cost_date: Optional[date] = None
    cost_month: Optional[str] = Field(None, pattern=COST_MONTH_PATTERN)
    frequency: Optional[ExpenseFrequency] = None
    scope: Optional[ExpenseScope] = None
    allocation_mode: Optional[AllocationMode] = None
    status: Optional[str] = None
    notes: Optional[str] = None


class ExpenseCreate(ExpenseBase):
    property_id: str
    type: str
    amount: Decimal = Field(..., ge=0, max_digits=14, decimal_places=2)
    cost_date: date


class ExpenseUpdate(ExpenseBase):
    non_nullable = ("property_id", "type", "amount", "currency", "cost_date")


class ExpenseOut(ExpenseBase):
    id: str
    amount: Optional[float] = None
    cost_month: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ExpenseListResponse(EmptyStringModel):
    expenses: List[ExpenseOut]
    total: int
