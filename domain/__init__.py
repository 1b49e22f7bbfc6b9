"""
Domain layer - Business entities, models, schemas, and enums.
"""

from domain import enums, identifiers, models, schemas

__all__ = ["enums", "identifiers", "models", "schemas"]
