"""
API schemas package.
"""

from .booking import AppointmentIn, AppointmentOut, RatingIn, RatingOut
from .common import ApiResponse, DeleteResult, ErrorResponse
from .hospital import HospitalIn, HospitalOut
from .users import AdminIn, AdminOut, DoctorIn, DoctorOut, PatientIn, PatientOut

__all__ = [
    "ApiResponse",
    "ErrorResponse",
    "DeleteResult",
    "AdminIn",
    "AdminOut",
    "DoctorIn",
    "DoctorOut",
    "PatientIn",
    "PatientOut",
    "HospitalIn",
    "HospitalOut",
    "AppointmentIn",
    "AppointmentOut",
    "RatingIn",
    "RatingOut",
]
