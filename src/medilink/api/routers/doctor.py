"""
Doctor endpoints.
"""

from ..deps import get_doctor_service
from ..schemas.users import DoctorIn, DoctorOut
from .crud import build_entity_router

router = build_entity_router("doctor", "Doctors", DoctorIn, DoctorOut, get_doctor_service)
