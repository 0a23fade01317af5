from .base_repo import Repository
from .entity_repos import (
    AdminRepository,
    AppointmentRepository,
    DoctorRepository,
    HospitalRepository,
    PatientRepository,
    RatingRepository,
)
from .registry import Repositories

__all__ = [
    "Repository",
    "Repositories",
    "AdminRepository",
    "DoctorRepository",
    "PatientRepository",
    "HospitalRepository",
    "AppointmentRepository",
    "RatingRepository",
]
