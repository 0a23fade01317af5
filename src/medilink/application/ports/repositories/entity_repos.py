"""
Repository interfaces, one per entity type.
"""

from ....domain.entities import (
    Admin,
    Appointment,
    Doctor,
    Hospital,
    Patient,
    Rating,
)
from .base_repo import Repository


class AdminRepository(Repository[Admin]):
    """Abstract repository for admin data access."""

    storage_key = "admin"


class DoctorRepository(Repository[Doctor]):
    """Abstract repository for doctor data access."""

    storage_key = "doctor"


class PatientRepository(Repository[Patient]):
    """Abstract repository for patient data access."""

    storage_key = "patient"


class HospitalRepository(Repository[Hospital]):
    """Abstract repository for hospital data access."""

    storage_key = "hospital"


class AppointmentRepository(Repository[Appointment]):
    """Abstract repository for appointment data access."""

    storage_key = "appointment"


class RatingRepository(Repository[Rating]):
    """Abstract repository for rating data access."""

    storage_key = "rating"
