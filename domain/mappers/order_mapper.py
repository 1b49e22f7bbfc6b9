"""
Order domain mappers.
Handles transformation between ORM models and DTOs for order-related entities.
"""

from domain.models import Order
from domain.schemas.meal_schemas import MealResponse
from domain.schemas.order_schemas import OrderItemResponse, OrderResponse


class OrderMapper:
    """Mapper for order-related transformations."""

    @staticmethod
    def to_response(order: Order) -> OrderResponse:
        """
        Convert Order ORM model to OrderResponse DTO.

        The ``meals`` list is a projection of each line item onto its meal, so
        a meal appears once per line item that references it.

        Args:
            order: Order ORM instance with items and their meals loaded

        Returns:
            OrderResponse DTO
        """
        items = [OrderItemResponse.model_validate(item) for item in order.items]

        return OrderResponse(
            order_id=order.order_id,
            user_id=order.user_id,
            total_price=order.total_price,
            status=order.status,
            client_reference=order.client_reference,
            created_at=order.created_at,
            order_items=items,
            meals=[item.meal for item in items],
        )


class MealMapper:
    """Mapper for catalog entries."""

    @staticmethod
    def to_response(meal) -> MealResponse:
        return MealResponse.model_validate(meal)
