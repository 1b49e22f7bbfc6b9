"""
App package - Application configuration and core utilities.
Contains settings, exceptions, and foundational application code.
"""

from app.config import settings, Settings
from app.exceptions import (
    AppError,
    ServiceValidationError,
    InvalidSelectionError,
    UnauthorizedError,
    NotFoundError,
    ItemsUnavailableError,
    ConflictError,
    DuplicateOrderError,
    StorageUnavailableError,
)

__all__ = [
    "settings",
    "Settings",
    "AppError",
    "ServiceValidationError",
    "InvalidSelectionError",
    "UnauthorizedError",
    "NotFoundError",
    "ItemsUnavailableError",
    "ConflictError",
    "DuplicateOrderError",
    "StorageUnavailableError",
]
