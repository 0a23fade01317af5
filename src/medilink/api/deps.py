"""FastAPI dependency providers.

Services are built per request around the repositories of the storage
backend opened at start-up.
"""

from fastapi import Request

from ..adapters.db.storage import StorageBackend
from ..application.ports.repositories import Repositories
from ..application.services import (
    AdminService,
    AppointmentService,
    DoctorService,
    HospitalService,
    PatientService,
    RatingService,
)


def get_storage(request: Request) -> StorageBackend:
    """Get the storage backend opened by the application lifespan."""
    return request.app.state.storage


def get_repositories(request: Request) -> Repositories:
    return get_storage(request).repositories


def get_admin_service(request: Request) -> AdminService:
    return AdminService(get_repositories(request).admin)


def get_doctor_service(request: Request) -> DoctorService:
    return DoctorService(get_repositories(request).doctor)


def get_patient_service(request: Request) -> PatientService:
    return PatientService(get_repositories(request).patient)


def get_hospital_service(request: Request) -> HospitalService:
    return HospitalService(get_repositories(request).hospital)


def get_appointment_service(request: Request) -> AppointmentService:
    return AppointmentService(get_repositories(request).appointment)


def get_rating_service(request: Request) -> RatingService:
    return RatingService(get_repositories(request).rating)
