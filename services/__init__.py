"""Services package - Business logic layer"""

from services.auth_service import AuthService
from services.catalog_service import CatalogService
from services.order_service import OrderService

__all__ = [
    "AuthService",
    "CatalogService",
    "OrderService",
]
