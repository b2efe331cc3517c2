"""
Domain mappers package.
Handles transformation between domain entities and DTOs (Data Transfer Objects).
"""

from domain.mappers.item_mapper import ItemMapper

__all__ = ["ItemMapper"]
