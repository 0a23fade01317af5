"""
Patient endpoints.
"""

from ..deps import get_patient_service
from ..schemas.users import PatientIn, PatientOut
from .crud import build_entity_router

router = build_entity_router("patient", "Patients", PatientIn, PatientOut, get_patient_service)
