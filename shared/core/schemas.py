from pydantic import BaseModel
from typing import Generic, Optional, TypeVar

# Shared properties
T = TypeVar("T")


class UserToken(BaseModel):
    user_id: str
    email: Optional[str] = None
    role: Optional[str] = None
    holder_id: Optional[str] = None
    exp: Optional[int] = None

    @property
    def scope_id(self) -> str:
        # holders act for themselves unless attached to another holder
        return self.holder_id or self.user_id


class Lookup(BaseModel):
    id: str
    name: str

    class Config:
        from_attributes = True


class JsonOutResult(BaseModel, Generic[T]):
    data: Optional[T] = None
    status: str
    status_code: str
    message: str


class DeleteResult(BaseModel):
    success: bool
