"""
Order and order line models.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    Enum as SQLEnum,
    ForeignKey,
    Integer,
    Numeric,
    String,
    TIMESTAMP,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship

from domain.enums import OrderStatus
from domain.identifiers import ID_LENGTH, new_id
from domain.models.database import Base
from domain.models.user import utcnow


class Order(Base):
    """An order placed by one user; immutable once created"""

    # "order" is a reserved word in SQL
    __tablename__ = "customer_order"

    order_id = Column(String(ID_LENGTH), primary_key=True, default=new_id)
    user_id = Column(
        String(ID_LENGTH),
        ForeignKey("app_user.user_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    total_price = Column(Numeric(10, 2), nullable=False)
    status = Column(SQLEnum(OrderStatus), nullable=False, default=OrderStatus.PENDING)
    client_reference = Column(String(64), nullable=True)
    created_at = Column(TIMESTAMP(timezone=True), default=utcnow, nullable=False)

    user = relationship("AppUser", back_populates="orders")
    items = relationship(
        "OrderItem",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderItem.position",
    )

    __table_args__ = (
        UniqueConstraint("user_id", "client_reference", name="uq_order_user_reference"),
        CheckConstraint("total_price >= 0", name="ck_order_total_nonneg"),
    )


class OrderItem(Base):
    """Association between one order and one meal"""

    __tablename__ = "order_item"

    order_item_id = Column(String(ID_LENGTH), primary_key=True, default=new_id)
    order_id = Column(
        String(ID_LENGTH),
        ForeignKey("customer_order.order_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    meal_id = Column(String(ID_LENGTH), ForeignKey("meal.meal_id"), nullable=False)
    # Keeps line items in the order they were selected
    position = Column(Integer, nullable=False, default=0)

    order = relationship("Order", back_populates="items")
    meal = relationship("Meal")
