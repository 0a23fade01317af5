"""
Generic repository interface shared by every entity type.
"""

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

from ....domain.value_objects.entity_id import EntityId

T = TypeVar("T")


class Repository(ABC, Generic[T]):
    """Abstract create/read/update/delete contract over one collection.

    Implementations assign the identifier on create and never change it
    afterwards. Store failures surface as ``DatabaseError``.
    """

    #: Table / collection name, e.g. "admin".
    storage_key: str = ""

    @abstractmethod
    async def create(self, entity: T) -> T:
        """Persist a new entity and return a copy carrying the assigned ID."""
        pass

    @abstractmethod
    async def find_by_id(self, entity_id: EntityId) -> Optional[T]:
        """Find an entity by ID."""
        pass

    @abstractmethod
    async def find_all(self) -> List[T]:
        """Return every entity in the collection."""
        pass

    @abstractmethod
    async def update(self, entity_id: EntityId, entity: T) -> Optional[T]:
        """Replace the business fields of an entity; None if it does not exist."""
        pass

    @abstractmethod
    async def delete(self, entity_id: EntityId) -> bool:
        """Delete an entity by ID."""
        pass
