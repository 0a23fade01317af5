"""Entity services: thin orchestration between the API and repositories.

Each call is forwarded to the repository as-is. No validation, duplicate
detection or error translation happens here.
"""

from typing import Generic, List, Optional, TypeVar

from ...domain.entities import (
    Admin,
    Appointment,
    Doctor,
    Hospital,
    Patient,
    Rating,
)
from ...domain.value_objects.entity_id import EntityId
from ..ports.repositories import (
    AdminRepository,
    AppointmentRepository,
    DoctorRepository,
    HospitalRepository,
    PatientRepository,
    RatingRepository,
    Repository,
)

T = TypeVar("T")


class EntityService(Generic[T]):
    """Pass-through service over one repository."""

    def __init__(self, repository: Repository[T]):
        self._repository = repository

    @property
    def storage_key(self) -> str:
        return self._repository.storage_key

    async def create(self, entity: T) -> T:
        return await self._repository.create(entity)

    async def get(self, entity_id: EntityId) -> Optional[T]:
        return await self._repository.find_by_id(entity_id)

    async def list(self) -> List[T]:
        return await self._repository.find_all()

    async def update(self, entity_id: EntityId, entity: T) -> Optional[T]:
        return await self._repository.update(entity_id, entity)

    async def delete(self, entity_id: EntityId) -> bool:
        return await self._repository.delete(entity_id)


class AdminService(EntityService[Admin]):
    """Service for admin records."""

    def __init__(self, admin_repository: AdminRepository):
        super().__init__(admin_repository)

    async def create_admin(self, admin: Admin) -> Admin:
        """Store a fully populated admin and return it with its assigned ID."""
        return await self.create(admin)


class DoctorService(EntityService[Doctor]):
    def __init__(self, doctor_repository: DoctorRepository):
        super().__init__(doctor_repository)


class PatientService(EntityService[Patient]):
    def __init__(self, patient_repository: PatientRepository):
        super().__init__(patient_repository)


class HospitalService(EntityService[Hospital]):
    def __init__(self, hospital_repository: HospitalRepository):
        super().__init__(hospital_repository)


class AppointmentService(EntityService[Appointment]):
    def __init__(self, appointment_repository: AppointmentRepository):
        super().__init__(appointment_repository)


class RatingService(EntityService[Rating]):
    def __init__(self, rating_repository: RatingRepository):
        super().__init__(rating_repository)
