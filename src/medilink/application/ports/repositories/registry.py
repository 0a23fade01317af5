"""
Per-backend bundle of entity repositories.
"""

from dataclasses import dataclass, fields
from typing import Dict

from .base_repo import Repository
from .entity_repos import (
    AdminRepository,
    AppointmentRepository,
    DoctorRepository,
    HospitalRepository,
    PatientRepository,
    RatingRepository,
)


@dataclass(frozen=True)
class Repositories:
    """The six repositories of a single storage backend."""

    admin: AdminRepository
    doctor: DoctorRepository
    patient: PatientRepository
    hospital: HospitalRepository
    appointment: AppointmentRepository
    rating: RatingRepository

    def by_storage_key(self) -> Dict[str, Repository]:
        return {f.name: getattr(self, f.name) for f in fields(self)}
