"""
Hospital endpoints.
"""

from ..deps import get_hospital_service
from ..schemas.hospital import HospitalIn, HospitalOut
from .crud import build_entity_router

router = build_entity_router("hospital", "Hospitals", HospitalIn, HospitalOut, get_hospital_service)
