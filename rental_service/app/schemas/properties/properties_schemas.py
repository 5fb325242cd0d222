from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from pydantic import Field

from shared.wrappers.empty_string_model_wrapper import EmptyStringModel
from ...enum.properties_enum import PropertyType


class PropertyBase(EmptyStringModel):
    code: Optional[str] = None
    name: Optional[str] = None
    address: Optional[str] = None
    type: Optional[PropertyType] = None
    apartment: Optional[str] = None
    room: Optional[str] = None
    beds: Optional[int] = Field(None, ge=0)
    room_size_m2: Optional[Decimal] = Field(None, ge=0, max_digits=10, decimal_places=2)
    has_balcony: Optional[bool] = None
    has_dryer: Optional[bool] = None
    has_ac: Optional[bool] = Field(None, alias="hasAC")
    has_heating: Optional[bool] = None
    base_monthly_rent: Optional[Decimal] = Field(None, ge=0, max_digits=14, decimal_places=2)
    monthly_utilities: Optional[Decimal] = Field(None, ge=0, max_digits=14, decimal_places=2)
    deposit_months: Optional[int] = Field(None, ge=0, le=24)
    building_id: Optional[str] = None
    floor: Optional[int] = Field(None, ge=-10, le=200)
    unit_number: Optional[str] = None
    website_url: Optional[str] = None
    airbnb_url: Optional[str] = None
    spotahome_url: Optional[str] = None
    is_published: Optional[bool] = None


class PropertyCreate(PropertyBase):
    code: str
    name: str
    type: PropertyType


class PropertyUpdate(PropertyBase):
    non_nullable = ("code", "name", "type", "is_published")


class PropertyOut(PropertyBase):
    id: str
    room_size_m2: Optional[float] = None
    base_monthly_rent: Optional[float] = None
    monthly_utilities: Optional[float] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class PropertyListResponse(EmptyStringModel):
    properties: List[PropertyOut]
    total: int
