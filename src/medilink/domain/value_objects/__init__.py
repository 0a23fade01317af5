"""
Value objects package for domain layer.
"""

from .entity_id import EntityId

__all__ = [
    "EntityId",
]
