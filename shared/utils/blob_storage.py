import logging
import os

from shared.core.config import settings

logger = logging.getLogger(__name__)


class LocalBlobStorage:
    """Blob store on the local filesystem, addressed by relative storage paths.

    Clients upload the bytes themselves; the service only needs to remove a
    blob once its attachment record is gone.
    """

    def __init__(self, root: str):
        self.root = os.path.abspath(root)

    def resolve(self, storage_path: str) -> str:
        full_path = os.path.abspath(
            os.path.join(self.root, storage_path.lstrip("/\\")))
        if os.path.commonpath([self.root, full_path]) != self.root:
            raise ValueError(f"Storage path escapes blob root: {storage_path}")
        return full_path

    def exists(self, storage_path: str) -> bool:
        return os.path.isfile(self.resolve(storage_path))

    def delete(self, storage_path: str) -> bool:
        """Delete one blob. Returns False when nothing was stored there."""
        full_path = self.resolve(storage_path)
        if not os.path.isfile(full_path):
            return False
        os.remove(full_path)
        logger.debug("Deleted blob %s", storage_path)
        return True


blob_storage = LocalBlobStorage(settings.UPLOAD_DIR)


def get_blob_storage() -> LocalBlobStorage:
    return blob_storage
