"""Patient domain entity."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..value_objects.entity_id import EntityId
from .user import UserFields


@dataclass
class Patient:
    """Patient domain entity."""

    user: UserFields = field(default_factory=UserFields)
    id: Optional[EntityId] = None
