import logging
from typing import Dict, List

from sqlalchemy.orm import Session

from shared.helpers.json_response_helper import not_found_response
from shared.utils.blob_storage import LocalBlobStorage
from ...enum.properties_enum import AttachmentModule
from ...models.common.attachments import Attachment
from ...schemas.common.attachments_schemas import AttachmentCreate, AttachmentOut

logger = logging.getLogger(__name__)


class AttachmentService:

    @staticmethod
    def add_file(db: Session, holder_id: str, module: AttachmentModule, entity_id: str, payload: AttachmentCreate) -> AttachmentOut:
        data = payload.model_dump(exclude_unset=True, exclude={"path"})
        if payload.storage_path:
            data["storage_path"] = payload.storage_path

        attachment = Attachment(
            holder_id=holder_id,
            module_name=module.value,
            entity_id=entity_id,
            **data,
        )
        db.add(attachment)
        db.commit()
        db.refresh(attachment)

        logger.info("Added file %s to %s/%s (storagePath=%s)",
                    attachment.id, module.value, entity_id, attachment.storage_path)
        return AttachmentOut.model_validate(attachment)

    @staticmethod
    def list_files(db: Session, holder_id: str, module: AttachmentModule, entity_id: str) -> Dict:
        rows = (
            db.query(Attachment)
            .filter(
                Attachment.holder_id == holder_id,
                Attachment.module_name == module.value,
                Attachment.entity_id == entity_id,
            )
            .order_by(Attachment.uploaded_at.desc())
            .all()
        )
        files = [AttachmentOut.model_validate(r) for r in rows]
        return {"files": files, "total": len(files)}

    @staticmethod
    def remove_file(db: Session, storage: LocalBlobStorage, holder_id: str, module: AttachmentModule, entity_id: str, file_id: str) -> Dict:
        attachment = db.query(Attachment).filter(
            Attachment.id == file_id,
            Attachment.holder_id == holder_id,
            Attachment.module_name == module.value,
            Attachment.entity_id == entity_id,
        ).first()
        if not attachment:
            return not_found_response("File", file_id)

        storage_path = attachment.storage_path
        db.delete(attachment)
        db.commit()

        AttachmentService.delete_blob(storage, storage_path)
        return {"success": True}

    @staticmethod
    def remove_all_for_entity(db: Session, holder_id: str, module: AttachmentModule, entity_id: str) -> List[str]:
        """Delete the file records of an entity and return their storage paths.

        The caller commits, then hands the paths to delete_blobs().
        """
        rows = db.query(Attachment).filter(
            Attachment.holder_id == holder_id,
            Attachment.module_name == module.value,
            Attachment.entity_id == entity_id,
        ).all()

        paths = [r.storage_path for r in rows if r.storage_path]
        for r in rows:
            db.delete(r)
        return paths

    @staticmethod
    def delete_blobs(storage: LocalBlobStorage, storage_paths: List[str]) -> None:
        for path in storage_paths:
            AttachmentService.delete_blob(storage, path)

    @staticmethod
    def delete_blob(storage: LocalBlobStorage, storage_path) -> None:
        # the record is already gone; a stale blob is only logged
        if not storage_path:
            return
        try:
            storage.delete(storage_path)
        except (OSError, ValueError):
            logger.warning("Could not delete blob %s", storage_path, exc_info=True)
