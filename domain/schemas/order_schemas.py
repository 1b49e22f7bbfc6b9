from pydantic import BaseModel, Field, model_validator
from typing import Any, Optional, List
from datetime import datetime

from domain.enums import OrderStatus
from domain.schemas.meal_schemas import MealResponse


class PlaceOrderRequest(BaseModel):
    """Body of POST /orders.

    Fields are accepted as sent and checked by the order service, after the
    session. Empty, malformed or non-list ``meal_ids`` therefore come back as
    400 (or 401 without a session) rather than as request-parsing errors.
    """

    meal_ids: Any = Field(
        None,
        description="Meal identifiers to order",
        json_schema_extra={"type": "array", "items": {"type": "string"}},
    )
    client_reference: Any = Field(
        None,
        description="Optional caller token (1-64 chars); a second order with the same token is rejected",
        json_schema_extra={"type": "string", "maxLength": 64},
    )

    @model_validator(mode="before")
    @classmethod
    def accept_any_body(cls, data):
        # A JSON body that is not an object carries no selection
        if not isinstance(data, dict):
            return {}
        return data


class OrderItemResponse(BaseModel):
    order_item_id: str
    order_id: str
    meal_id: str
    meal: MealResponse

    model_config = {"from_attributes": True}


class OrderResponse(BaseModel):
    order_id: str
    user_id: str
    total_price: float
    status: OrderStatus
    client_reference: Optional[str] = None
    created_at: datetime
    order_items: List[OrderItemResponse]
    meals: List[MealResponse]
