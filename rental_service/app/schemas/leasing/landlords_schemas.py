from datetime import datetime
from typing import List, Optional
from pydantic import EmailStr

from shared.wrappers.empty_string_model_wrapper import EmptyStringModel


class LandlordBase(EmptyStringModel):
    name: Optional[str] = None
    external_id: Optional[str] = None
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    iban: Optional[str] = None
    notes: Optional[str] = None


class LandlordCreate(LandlordBase):
    name: str


class LandlordUpdate(LandlordBase):
    non_nullable = ("name",)


class LandlordOut(LandlordBase):
    id: str
    email: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class LandlordListResponse(EmptyStringModel):
    landlords: List[LandlordOut]
    total: int
