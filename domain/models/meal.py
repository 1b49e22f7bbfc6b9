"""
Meal catalog model.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Numeric,
    String,
    Text,
    TIMESTAMP,
)

from domain.identifiers import ID_LENGTH, new_id
from domain.models.database import Base
from domain.models.user import utcnow


class Meal(Base):
    """A catalog entry a user may order"""

    __tablename__ = "meal"

    meal_id = Column(String(ID_LENGTH), primary_key=True, default=new_id)
    name = Column(Text, nullable=False)
    description = Column(Text)
    price = Column(Numeric(10, 2), nullable=False)
    category = Column(Text)
    image_url = Column(Text)
    is_available = Column(Boolean, nullable=False, default=True)
    created_at = Column(
        TIMESTAMP(timezone=True), default=utcnow, nullable=False, index=True
    )

    __table_args__ = (CheckConstraint("price >= 0", name="ck_meal_price_nonneg"),)
