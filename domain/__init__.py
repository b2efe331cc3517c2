"""
Domain layer - Cart entities, discount strategies, schemas, and enums.
"""

from domain import enums, models, schemas, discounts

__all__ = ["enums", "models", "schemas", "discounts"]
