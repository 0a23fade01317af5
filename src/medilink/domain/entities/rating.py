"""Rating domain entity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..value_objects.entity_id import EntityId


@dataclass
class Rating:
    """Rating domain entity. Not linked to any appointment, doctor or patient."""

    rating: int = 0
    comment: Optional[str] = None
    date: int = 0
    time: int = 0
    id: Optional[EntityId] = None
