"""Admin domain entity."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..value_objects.entity_id import EntityId
from .user import UserFields


@dataclass
class Admin:
    """Admin domain entity. Carries nothing beyond the user fields."""

    user: UserFields = field(default_factory=UserFields)
    id: Optional[EntityId] = None
