from typing import Callable

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from shared.core.auth import allow_holder
from shared.core.database import get_db
from shared.core.schemas import DeleteResult, UserToken
from shared.helpers.json_response_helper import not_found_response
from shared.utils.blob_storage import LocalBlobStorage, get_blob_storage
from ...crud.common.attachment_crud import AttachmentService
from ...enum.properties_enum import AttachmentModule
from ...schemas.common.attachments_schemas import (
    AttachmentCreate, AttachmentListResponse, AttachmentOut,
)


def build_files_router(module: AttachmentModule, entity_name: str, get_entity: Callable) -> APIRouter:
    """File-record routes mounted under /api/<module>/{entity_id}/files.

    ``get_entity(db, holder_id, entity_id)`` returns the owning row or None.
    """
    router = APIRouter(
        prefix=f"/api/{module.value}",
        tags=[f"{module.value} files"],
        dependencies=[Depends(allow_holder)]
    )

    def _ensure_entity(db: Session, holder_id: str, entity_id: str):
        if not get_entity(db, holder_id, entity_id):
            return not_found_response(entity_name, entity_id)

    @router.get("/{entity_id}/files", response_model=AttachmentListResponse, response_model_exclude_none=True)
    def list_files(
        entity_id: str,
        db: Session = Depends(get_db),
        current_user: UserToken = Depends(allow_holder)
    ):
        _ensure_entity(db, current_user.scope_id, entity_id)
        return AttachmentService.list_files(db, current_user.scope_id, module, entity_id)

    @router.post("/{entity_id}/files", response_model=AttachmentOut, response_model_exclude_none=True)
    def add_file(
        entity_id: str,
        payload: AttachmentCreate,
        db: Session = Depends(get_db),
        current_user: UserToken = Depends(allow_holder)
    ):
        _ensure_entity(db, current_user.scope_id, entity_id)
        return AttachmentService.add_file(db, current_user.scope_id, module, entity_id, payload)

    @router.delete("/{entity_id}/files/{file_id}", response_model=DeleteResult)
    def remove_file(
        entity_id: str,
        file_id: str,
        db: Session = Depends(get_db),
        storage: LocalBlobStorage = Depends(get_blob_storage),
        current_user: UserToken = Depends(allow_holder)
    ):
        return AttachmentService.remove_file(db, storage, current_user.scope_id, module, entity_id, file_id)

    return router
