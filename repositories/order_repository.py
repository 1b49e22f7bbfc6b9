"""
Order Repository - Data access layer for orders and their line items
"""

from decimal import Decimal
from typing import List, Optional
from sqlalchemy.orm import Session, selectinload

from repositories.base import BaseRepository
from domain.enums import OrderStatus
from domain.models import Meal, Order, OrderItem


class OrderRepository(BaseRepository[Order]):
    """Repository for order data access"""

    def __init__(self, db: Session):
        super().__init__(db, Order)

    def _with_items(self):
        return self.db.query(Order).options(
            selectinload(Order.items).selectinload(OrderItem.meal)
        )

    def get_by_user_id(self, user_id: str) -> List[Order]:
        """Get all orders for a user, newest first"""
        return (
            self._with_items()
            .filter(Order.user_id == user_id)
            .order_by(Order.created_at.desc())
            .all()
        )

    def create_with_items(
        self,
        user_id: str,
        meals: List[Meal],
        total_price: Decimal,
        client_reference: Optional[str] = None,
    ) -> Order:
        """
        Create an order and one line item per meal in a single transaction.

        The caller owns error handling; on failure nothing is committed and the
        session is rolled back here before the exception propagates.
        """
        order = Order(
            user_id=user_id,
            total_price=total_price,
            status=OrderStatus.PENDING,
            client_reference=client_reference,
        )
        order.items = [
            OrderItem(meal_id=meal.meal_id, meal=meal, position=index)
            for index, meal in enumerate(meals)
        ]
        try:
            self.db.add(order)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        return order
