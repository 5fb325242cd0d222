import uuid
from sqlalchemy import Column, Date, DateTime, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from shared.core.database import Base


class Lease(Base):
    __tablename__ = "leases"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    holder_id = Column(String(128), nullable=False, index=True)
    type = Column(String(16), nullable=False)  # "TENANT" | "LANDLORD"

    property_id = Column(String(36), ForeignKey("properties.id"), nullable=False)
    tenant_id = Column(String(36), ForeignKey("tenants.id"), nullable=True)
    landlord_id = Column(String(36), ForeignKey("landlords.id"), nullable=True)
    building_id = Column(String(64), nullable=True)

    start_date = Column(Date, nullable=True)
    end_date = Column(Date, nullable=True)
    next_payment_due = Column(Date, nullable=True)
    due_day_of_month = Column(Integer, nullable=True)

    monthly_rent_without_bills = Column(Numeric(14, 2), nullable=True)
    monthly_rent_with_bills = Column(Numeric(14, 2), nullable=True)
    bills_included_amount = Column(Numeric(14, 2), nullable=True)

    deposit_amount = Column(Numeric(14, 2), nullable=True)
    admin_fee_amount = Column(Numeric(14, 2), nullable=True)
    booking_cost_amount = Column(Numeric(14, 2), nullable=True)
    booking_cost_date = Column(Date, nullable=True)
    registration_tax_amount = Column(Numeric(14, 2), nullable=True)
    registration_tax_date = Column(Date, nullable=True)

    status = Column(String(16), default="ACTIVE")
    created_at = Column(DateTime(timezone=True),
                        server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # relationships
    property = relationship("Property", back_populates="leases")
    tenant = relationship("Tenant", back_populates="leases")
    landlord = relationship("Landlord", back_populates="leases")
