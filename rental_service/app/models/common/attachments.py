import uuid
from datetime import datetime, timezone
from sqlalchemy import BigInteger, Column, DateTime, String, Text
from shared.core.database import Base


class Attachment(Base):
    __tablename__ = "attachments"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    holder_id = Column(String(128), nullable=False, index=True)
    module_name = Column(String(64), nullable=False)
    entity_id = Column(String(36), nullable=False, index=True)

    file_name = Column(String(255), nullable=True)
    storage_path = Column(Text, nullable=True)
    download_url = Column(Text, nullable=True)
    mime_type = Column(String(128), nullable=True)
    size_bytes = Column(BigInteger, nullable=True)
    notes = Column(Text, nullable=True)
    uploaded_at = Column(DateTime(timezone=True),
                         default=lambda: datetime.now(timezone.utc), nullable=False)
