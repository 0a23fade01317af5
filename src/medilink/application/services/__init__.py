from .entity_service import (
    AdminService,
    AppointmentService,
    DoctorService,
    EntityService,
    HospitalService,
    PatientService,
    RatingService,
)

__all__ = [
    "EntityService",
    "AdminService",
    "DoctorService",
    "PatientService",
    "HospitalService",
    "AppointmentService",
    "RatingService",
]
