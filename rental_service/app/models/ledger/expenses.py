import uuid
from sqlalchemy import Column, Date, DateTime, Numeric, String, Text
from sqlalchemy.sql import func
from shared.core.database import Base


class Expense(Base):
    __tablename__ = "expenses"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    holder_id = Column(String(128), nullable=False, index=True)

    lease_id = Column(String(36), nullable=True, index=True)
    property_id = Column(String(36), nullable=False)  # building or unit
    landlord_id = Column(String(36), nullable=True)

    type = Column(String(64), nullable=False)
    description = Column(Text, nullable=True)
    amount = Column(Numeric(14, 2), nullable=False)
    currency = Column(String(3), nullable=False, default="EUR")

    cost_date = Column(Date, nullable=False)
    cost_month = Column(String(7), nullable=True)  # "YYYY-MM"
    frequency = Column(String(16), nullable=True)  # "ONCE" | "MONTHLY" | "YEARLY"
    scope = Column(String(16), nullable=True)  # "BUILDING" | "UNIT"
    allocation_mode = Column(String(16), nullable=True)
    status = Column(String(16), nullable=True)
    notes = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True),
                        server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True),
                        server_default=func.now(), onupdate=func.now())
