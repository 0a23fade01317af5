"""Doctor domain entity."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..value_objects.entity_id import EntityId
from .user import UserFields


@dataclass
class Doctor:
    """Doctor domain entity.

    hospital_name is free text and is not checked against stored hospitals.
    """

    user: UserFields = field(default_factory=UserFields)
    specialisation: str = ""
    hospital_name: str = ""
    id: Optional[EntityId] = None
