import uuid
from sqlalchemy import Boolean, Column, Date, DateTime, String, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from shared.core.database import Base


class Tenant(Base):
    __tablename__ = "tenants"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    holder_id = Column(String(128), nullable=False, index=True)

    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    email = Column(String(200), nullable=True)
    phone = Column(String(32), nullable=True)

    birthday = Column(Date, nullable=True)
    nationality = Column(String(64), nullable=True)
    eu_citizen = Column(Boolean, nullable=True)
    gender = Column(String(8), nullable=True)  # "M" | "F" | "OTHER"

    address = Column(Text, nullable=True)
    tax_code = Column(String(32), nullable=True)
    document_type = Column(String(32), nullable=True)
    document_number = Column(String(64), nullable=True)

    school = Column(String(100), nullable=True)
    notes = Column(Text, nullable=True)
    status = Column(String(16), nullable=True)

    created_at = Column(DateTime(timezone=True),
                        server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    leases = relationship("Lease", back_populates="tenant")
