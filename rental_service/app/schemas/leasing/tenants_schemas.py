from datetime import date, datetime
from typing import List, Optional

from shared.wrappers.empty_string_model_wrapper import EmptyStringModel
from ...enum.leasing_enum import Gender, TenantStatus


class TenantBase(EmptyStringModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    birthday: Optional[date] = None
    nationality: Optional[str] = None
    eu_citizen: Optional[bool] = None
    gender: Optional[Gender] = None
    address: Optional[str] = None
    tax_code: Optional[str] = None
    document_type: Optional[str] = None
    document_number: Optional[str] = None
    school: Optional[str] = None
    notes: Optional[str] = None
    status: Optional[TenantStatus] = None


class TenantCreate(TenantBase):
    first_name: str
    last_name: str


class TenantUpdate(TenantBase):
    non_nullable = ("first_name", "last_name")


class TenantOut(TenantBase):
    id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class TenantListResponse(EmptyStringModel):
    tenants: List[TenantOut]
    total: int
