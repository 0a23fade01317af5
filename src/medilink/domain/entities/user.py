"""Shared personal/contact fields embedded by admins, doctors and patients."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class UserFields:
    """User fields value, embedded by value in each user-like entity.

    Never persisted on its own. email and phone are unique per collection,
    which only the store enforces.
    """

    first_name: str = ""
    last_name: str = ""
    email: Optional[str] = None
    phone: Optional[str] = None
    password: str = ""
    description: Optional[str] = None
