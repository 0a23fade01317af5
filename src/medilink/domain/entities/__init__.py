"""
Domain entities package.
"""

from .admin import Admin
from .appointment import Appointment
from .doctor import Doctor
from .hospital import Hospital
from .patient import Patient
from .rating import Rating
from .user import UserFields

__all__ = [
    "UserFields",
    "Admin",
    "Doctor",
    "Patient",
    "Hospital",
    "Appointment",
    "Rating",
]
