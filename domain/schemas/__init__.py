"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.auth_schemas import (
    SignupRequest,
    LoginRequest,
    UserResponse,
    SessionUser,
    TokenResponse,
)
from domain.schemas.meal_schemas import MealResponse, MealSeed
from domain.schemas.order_schemas import (
    PlaceOrderRequest,
    OrderItemResponse,
    OrderResponse,
)

__all__ = [
    # Auth schemas
    "SignupRequest",
    "LoginRequest",
    "UserResponse",
    "SessionUser",
    "TokenResponse",
    # Meal schemas
    "MealResponse",
    "MealSeed",
    # Order schemas
    "PlaceOrderRequest",
    "OrderItemResponse",
    "OrderResponse",
]
