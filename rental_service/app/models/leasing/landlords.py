import uuid
from sqlalchemy import Column, DateTime, String, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from shared.core.database import Base


class Landlord(Base):
    __tablename__ = "landlords"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    holder_id = Column(String(128), nullable=False, index=True)

    name = Column(String(200), nullable=False)
    external_id = Column(String(64), nullable=True)  # id in the legacy spreadsheet
    email = Column(String(200), nullable=True)
    phone = Column(String(32), nullable=True)
    iban = Column(String(34), nullable=True)
    notes = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True),
                        server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    leases = relationship("Lease", back_populates="landlord")
