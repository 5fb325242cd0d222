from sqlalchemy import Column, DateTime, String
from sqlalchemy.sql import func

from shared.core.database import Base


class UserProfile(Base):
    __tablename__ = "users"

    # id of the identity in the bearer token
    id = Column(String(128), primary_key=True)
    email = Column(String(200), nullable=True)
    role = Column(String(16), nullable=True)  # "HOLDER" | "TENANT"
    # set when the user works on behalf of another holder
    holder_id = Column(String(128), nullable=True)
    created_at = Column(DateTime(timezone=True),
                        server_default=func.now(), nullable=False)
