"""API routes package"""

from . import auth, health, meals, orders

__all__ = ["auth", "health", "meals", "orders"]
