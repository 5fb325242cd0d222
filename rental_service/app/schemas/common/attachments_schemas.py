from datetime import datetime
from typing import List, Optional
from pydantic import Field, model_validator

from shared.wrappers.empty_string_model_wrapper import EmptyStringModel


class AttachmentCreate(EmptyStringModel):
    file_name: Optional[str] = None
    # path in the blob store, e.g. holders/<holder>/payments/<id>/files/<name>
    storage_path: Optional[str] = None
    # older front-ends send "path" instead of "storagePath"
    path: Optional[str] = None
    download_url: Optional[str] = None
    mime_type: Optional[str] = None
    size_bytes: Optional[int] = Field(None, ge=0)
    notes: Optional[str] = None

    @model_validator(mode="after")
    def merge_legacy_path(self):
        if not self.storage_path and self.path:
            self.storage_path = self.path
        return self


class AttachmentOut(EmptyStringModel):
    id: str
    module_name: str
    entity_id: str
    file_name: Optional[str] = None
    storage_path: Optional[str] = None
    download_url: Optional[str] = None
    mime_type: Optional[str] = None
    size_bytes: Optional[int] = None
    notes: Optional[str] = None
    uploaded_at: Optional[datetime] = None


class AttachmentListResponse(EmptyStringModel):
    files: List[AttachmentOut]
    total: int
