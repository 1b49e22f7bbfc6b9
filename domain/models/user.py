"""
User-related database models.
"""

from datetime import datetime, timezone

from sqlalchemy import Column, String, Text, TIMESTAMP
from sqlalchemy.orm import relationship

from domain.identifiers import ID_LENGTH, new_id
from domain.models.database import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AppUser(Base):
    """User account model"""

    __tablename__ = "app_user"

    user_id = Column(String(ID_LENGTH), primary_key=True, default=new_id)
    email = Column(String(320), unique=True, nullable=False)
    full_name = Column(Text)
    password_hash = Column(String(255), nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(
        TIMESTAMP(timezone=True), default=utcnow, onupdate=utcnow, nullable=False
    )

    # Relationships
    orders = relationship("Order", back_populates="user", cascade="all, delete-orphan")
