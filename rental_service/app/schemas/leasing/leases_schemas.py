from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional
from pydantic import Field

from shared.wrappers.empty_string_model_wrapper import EmptyStringModel
from ...enum.leasing_enum import LeaseStatus, LeaseType


class LeaseBase(EmptyStringModel):
    type: Optional[LeaseType] = None
    property_id: Optional[str] = None
    tenant_id: Optional[str] = None            # REQUIRED for TENANT leases
    landlord_id: Optional[str] = None          # REQUIRED for LANDLORD leases
    building_id: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    next_payment_due: Optional[date] = None
    due_day_of_month: Optional[int] = Field(None, ge=1, le=31)
    monthly_rent_without_bills: Optional[Decimal] = Field(None, ge=0, max_digits=14, decimal_places=2)   # net
    monthly_rent_with_bills: Optional[Decimal] = Field(None, ge=0, max_digits=14, decimal_places=2)      # gross
    bills_included_amount: Optional[Decimal] = Field(None, ge=0, max_digits=14, decimal_places=2)
    deposit_amount: Optional[Decimal] = Field(None, ge=0, max_digits=14, decimal_places=2)
    admin_fee_amount: Optional[Decimal] = Field(None, ge=0, max_digits=14, decimal_places=2)
    booking_cost_amount: Optional[Decimal] = Field(None, ge=0, max_digits=14, decimal_places=2)
    booking_cost_date: Optional[date] = None
    registration_tax_amount: Optional[Decimal] = Field(None, ge=0, max_digits=14, decimal_places=2)
    registration_tax_date: Optional[date] = None
    status: Optional[LeaseStatus] = None


class LeaseCreate(LeaseBase):
    type: LeaseType
    property_id: str
    start_date: date
    monthly_rent_without_bills: Decimal = Field(..., ge=0, max_digits=14, decimal_places=2)


class LeaseUpdate(LeaseBase):
    # nulls on the required lease fields are refused by leases_crud._validate_lease
    pass


class LeaseOut(LeaseBase):
    id: str
    monthly_rent_without_bills: Optional[float] = None
    monthly_rent_with_bills: Optional[float] = None
    bills_included_amount: Optional[float] = None
    deposit_amount: Optional[float] = None
    admin_fee_amount: Optional[float] = None
    booking_cost_amount: Optional[float] = None
    registration_tax_amount: Optional[float] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class LeaseListResponse(EmptyStringModel):
    leases: List[LeaseOut]
    total: int


class ScheduleResult(EmptyStringModel):
    generated: int
