"""
Entity ID value object for store-assigned identifiers.

The relational store hands out integer surrogate keys and the document store
hands out ObjectId strings; both are carried as the same opaque string.
"""

from dataclasses import dataclass
from typing import Any, Optional, Union

# Largest key a signed 64-bit INTEGER column can hold
MAX_INT_KEY = 2**63 - 1


@dataclass(frozen=True)
class EntityId:
    """Immutable, opaque entity identifier value object."""

    value: str

    def __post_init__(self) -> None:
        """Validate identifier shape."""
        if not isinstance(self.value, str):
            raise ValueError("Entity ID must be a string")

        if not self.value:
            raise ValueError("Entity ID cannot be empty")

    def __str__(self) -> str:
        """String representation."""
        return self.value

    def __eq__(self, other: Any) -> bool:
        """Equality comparison."""
        if not isinstance(other, EntityId):
            return False
        return self.value == other.value

    def __hash__(self) -> int:
        """Hash for use in sets and dictionaries."""
        return hash(self.value)

    def as_int(self) -> Optional[int]:
        """Integer view used by integer-keyed stores.

        None when the value is not plain ASCII digits or does not fit a
        64-bit key.
        """
        if not (self.value.isascii() and self.value.isdigit()):
            return None
        key = int(self.value)
        if key > MAX_INT_KEY:
            return None
        return key

    @classmethod
    def of(cls, raw: Union[int, str, Any]) -> "EntityId":
        """Wrap a store-native key (int, ObjectId, str)."""
        return cls(str(raw))
