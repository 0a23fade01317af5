"""Hospital domain entity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..value_objects.entity_id import EntityId


@dataclass
class Hospital:
    """Hospital domain entity.

    departments is a single free-text value. email and phone_no are unique
    per collection.
    """

    hospital_name: str = ""
    hospital_address: str = ""
    departments: str = ""
    email: Optional[str] = None
    phone_no: Optional[str] = None
    password: str = ""
    id: Optional[EntityId] = None
