"""
Appointment endpoints.
"""

from ..deps import get_appointment_service
from ..schemas.booking import AppointmentIn, AppointmentOut
from .crud import build_entity_router

router = build_entity_router("appointment", "Appointments", AppointmentIn, AppointmentOut, get_appointment_service)
