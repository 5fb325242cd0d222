import uuid
from sqlalchemy import Boolean, Column, DateTime, Integer, Numeric, String, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from shared.core.database import Base


class Property(Base):
    __tablename__ = "properties"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    holder_id = Column(String(128), nullable=False, index=True)

    code = Column(String(64), nullable=False)
    name = Column(String(200), nullable=False)
    address = Column(Text, nullable=True)
    type = Column(String(32), nullable=False)  # "APARTMENT" | "ROOM" | "BED" | "BUILDING"
    apartment = Column(String(64), nullable=True)
    room = Column(String(64), nullable=True)
    beds = Column(Integer, nullable=True)
    room_size_m2 = Column(Numeric(10, 2), nullable=True)

    has_balcony = Column(Boolean, nullable=True)
    has_dryer = Column(Boolean, nullable=True)
    has_ac = Column(Boolean, nullable=True)
    has_heating = Column(Boolean, nullable=True)

    base_monthly_rent = Column(Numeric(14, 2), nullable=True)
    monthly_utilities = Column(Numeric(14, 2), nullable=True)
    deposit_months = Column(Integer, nullable=True)

    # grouping attribute copied onto generated payments
    building_id = Column(String(64), nullable=True)
    floor = Column(Integer, nullable=True)
    unit_number = Column(String(32), nullable=True)

    website_url = Column(Text, nullable=True)
    airbnb_url = Column(Text, nullable=True)
    spotahome_url = Column(Text, nullable=True)
    is_published = Column(Boolean, default=False, nullable=False)

    created_at = Column(DateTime(timezone=True),
                        server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    leases = relationship("Lease", back_populates="property")
