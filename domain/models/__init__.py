"""
Domain models package - SQLAlchemy ORM models.
"""

from domain.models.database import Base, Database
from domain.models.user import AppUser
from domain.models.meal import Meal
from domain.models.order import Order, OrderItem

__all__ = [
    # Database
    "Base",
    "Database",
    # User models
    "AppUser",
    # Catalog models
    "Meal",
    # Order models
    "Order",
    "OrderItem",
]
