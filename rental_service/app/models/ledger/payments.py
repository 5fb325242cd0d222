import uuid
from sqlalchemy import Column, Date, DateTime, Numeric, String, Text
from sqlalchemy.sql import func
from shared.core.database import Base


class Payment(Base):
    __tablename__ = "payments"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    holder_id = Column(String(128), nullable=False, index=True)

    # plain references: ledger rows outlive the lease they came from
    lease_id = Column(String(36), nullable=True, index=True)
    tenant_id = Column(String(36), nullable=True)
    property_id = Column(String(36), nullable=True)
    building_id = Column(String(64), nullable=True)

    due_date = Column(Date, nullable=False)
    paid_date = Column(Date, nullable=True)
    amount = Column(Numeric(14, 2), nullable=False)
    currency = Column(String(3), nullable=False, default="EUR")
    kind = Column(String(16), nullable=False)  # "RENT" | "BUILDING_FEE" | "OTHER"
    status = Column(String(16), nullable=False, default="PLANNED")
    notes = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True),
                        server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True),
                        server_default=func.now(), onupdate=func.now())
