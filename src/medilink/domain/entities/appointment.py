"""Appointment domain entity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..value_objects.entity_id import EntityId


@dataclass
class Appointment:
    """Appointment domain entity.

    doctor_name and hospital_name are denormalized strings, not references.
    """

    date: str = ""
    time: str = ""
    doctor_name: str = ""
    hospital_name: str = ""
    id: Optional[EntityId] = None
