"""
Repositories package - Data access layer.
"""

from repositories.base import BaseRepository
from repositories.user_repository import UserRepository
from repositories.meal_repository import MealRepository
from repositories.order_repository import OrderRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
    "MealRepository",
    "OrderRepository",
]
