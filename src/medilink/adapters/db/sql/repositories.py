"""
SQLAlchemy implementations of the entity repositories.

Rows are keyed by an autoincrement integer; the domain sees it as an
opaque ``EntityId`` string.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from ....application.ports.repositories import (
    AdminRepository,
    AppointmentRepository,
    DoctorRepository,
    HospitalRepository,
    PatientRepository,
    RatingRepository,
    Repositories,
)
from ....core.exceptions import DatabaseError
from ....domain.entities import (
    Admin,
    Appointment,
    Doctor,
    Hospital,
    Patient,
    Rating,
    UserFields,
)
from ....domain.value_objects.entity_id import EntityId
from .models import (
    AdminRow,
    AppointmentRow,
    Base,
    DoctorRow,
    HospitalRow,
    PatientRow,
    RatingRow,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")
RowT = TypeVar("RowT", bound=Base)


def _user_columns(user: UserFields) -> Dict[str, Any]:
    return {
        "first_name": user.first_name,
        "last_name": user.last_name,
        "email": user.email,
        "phone": user.phone,
        "password": user.password,
        "description": user.description,
    }


def _user_from_row(row: Any) -> UserFields:
    return UserFields(
        first_name=row.first_name,
        last_name=row.last_name,
        email=row.email,
        phone=row.phone,
        password=row.password,
        description=row.description,
    )


class SqlRepository(ABC, Generic[T, RowT]):
    """Shared CRUD logic; subclasses provide the row model and the mapping."""

    row_model: Type[RowT]
    pk_column: str

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    @abstractmethod
    def _to_columns(self, entity: T) -> Dict[str, Any]:
        """Column values for a row built from the entity."""
        pass

    @abstractmethod
    def _to_domain(self, row: RowT) -> T:
        """Entity built from a stored row."""
        pass

    def _entity_id(self, row: RowT) -> EntityId:
        return EntityId.of(getattr(row, self.pk_column))

    def _fail(self, operation: str, exc: SQLAlchemyError, entity_id: Optional[EntityId] = None) -> DatabaseError:
        details = {"operation": operation, "storage_key": self.storage_key}
        if entity_id is not None:
            details["id"] = entity_id.value
        logger.error(f"SQL {operation} failed on '{self.storage_key}': {exc}")
        return DatabaseError(f"Failed to {operation} {self.storage_key}: {exc.__class__.__name__}", details)

    async def create(self, entity: T) -> T:
        row = self.row_model(**self._to_columns(entity))
        try:
            async with self._session_factory.begin() as session:
                session.add(row)
        except SQLAlchemyError as exc:
            raise self._fail("create", exc) from exc
        created = self._to_domain(row)
        logger.info(f"Created {self.storage_key} {created.id}")
        return created

    async def find_by_id(self, entity_id: EntityId) -> Optional[T]:
        pk = entity_id.as_int()
        if pk is None:
            return None
        try:
            async with self._session_factory() as session:
                row = await session.get(self.row_model, pk)
        except SQLAlchemyError as exc:
            raise self._fail("read", exc, entity_id) from exc
        if row is None:
            return None
        return self._to_domain(row)

    async def find_all(self) -> List[T]:
        stmt = select(self.row_model).order_by(getattr(self.row_model, self.pk_column))
        try:
            async with self._session_factory() as session:
                rows = (await session.execute(stmt)).scalars().all()
        except SQLAlchemyError as exc:
            raise self._fail("list", exc) from exc
        return [self._to_domain(row) for row in rows]

    async def update(self, entity_id: EntityId, entity: T) -> Optional[T]:
        pk = entity_id.as_int()
        if pk is None:
            return None
        try:
            async with self._session_factory.begin() as session:
                row = await session.get(self.row_model, pk)
                if row is None:
                    return None
                for column, value in self._to_columns(entity).items():
                    setattr(row, column, value)
        except SQLAlchemyError as exc:
            raise self._fail("update", exc, entity_id) from exc
        logger.info(f"Updated {self.storage_key} {entity_id}")
        return self._to_domain(row)

    async def delete(self, entity_id: EntityId) -> bool:
        pk = entity_id.as_int()
        if pk is None:
            return False
        try:
            async with self._session_factory.begin() as session:
                row = await session.get(self.row_model, pk)
                if row is None:
                    return False
                await session.delete(row)
        except SQLAlchemyError as exc:
            raise self._fail("delete", exc, entity_id) from exc
        logger.info(f"Deleted {self.storage_key} {entity_id}")
        return True


class SqlAdminRepository(SqlRepository[Admin, AdminRow], AdminRepository):
    row_model = AdminRow
    pk_column = "admin_id"

    def _to_columns(self, entity: Admin) -> Dict[str, Any]:
        return _user_columns(entity.user)

    def _to_domain(self, row: AdminRow) -> Admin:
        return Admin(user=_user_from_row(row), id=self._entity_id(row))


class SqlDoctorRepository(SqlRepository[Doctor, DoctorRow], DoctorRepository):
    row_model = DoctorRow
    pk_column = "doctor_id"

    def _to_columns(self, entity: Doctor) -> Dict[str, Any]:
        return {
            **_user_columns(entity.user),
            "specialisation": entity.specialisation,
            "hospital_name": entity.hospital_name,
        }

    def _to_domain(self, row: DoctorRow) -> Doctor:
        return Doctor(
            user=_user_from_row(row),
            specialisation=row.specialisation,
            hospital_name=row.hospital_name,
            id=self._entity_id(row),
        )


class SqlPatientRepository(SqlRepository[Patient, PatientRow], PatientRepository):
    row_model = PatientRow
    pk_column = "patient_id"

    def _to_columns(self, entity: Patient) -> Dict[str, Any]:
        return _user_columns(entity.user)

    def _to_domain(self, row: PatientRow) -> Patient:
        return Patient(user=_user_from_row(row), id=self._entity_id(row))


class SqlHospitalRepository(SqlRepository[Hospital, HospitalRow], HospitalRepository):
    row_model = HospitalRow
    pk_column = "hospital_id"

    def _to_columns(self, entity: Hospital) -> Dict[str, Any]:
        return {
            "hospital_name": entity.hospital_name,
            "hospital_address": entity.hospital_address,
            "departments": entity.departments,
            "email": entity.email,
            "phone_no": entity.phone_no,
            "password": entity.password,
        }

    def _to_domain(self, row: HospitalRow) -> Hospital:
        return Hospital(
            hospital_name=row.hospital_name,
            hospital_address=row.hospital_address,
            departments=row.departments,
            email=row.email,
            phone_no=row.phone_no,
            password=row.password,
            id=self._entity_id(row),
        )


class SqlAppointmentRepository(SqlRepository[Appointment, AppointmentRow], AppointmentRepository):
    row_model = AppointmentRow
    pk_column = "appointment_id"

    def _to_columns(self, entity: Appointment) -> Dict[str, Any]:
        return {
            "date": entity.date,
            "time": entity.time,
            "doctor_name": entity.doctor_name,
            "hospital_name": entity.hospital_name,
        }

    def _to_domain(self, row: AppointmentRow) -> Appointment:
        return Appointment(
            date=row.date,
            time=row.time,
            doctor_name=row.doctor_name,
            hospital_name=row.hospital_name,
            id=self._entity_id(row),
        )


class SqlRatingRepository(SqlRepository[Rating, RatingRow], RatingRepository):
    row_model = RatingRow
    pk_column = "rating_id"

    def _to_columns(self, entity: Rating) -> Dict[str, Any]:
        return {
            "rating": entity.rating,
            "comment": entity.comment,
            "date": entity.date,
            "time": entity.time,
        }

    def _to_domain(self, row: RatingRow) -> Rating:
        return Rating(
            rating=row.rating,
            comment=row.comment,
            date=row.date,
            time=row.time,
            id=self._entity_id(row),
        )


def build_sql_repositories(session_factory: async_sessionmaker[AsyncSession]) -> Repositories:
    """Bundle the relational repositories around one session factory."""
    return Repositories(
        admin=SqlAdminRepository(session_factory),
        doctor=SqlDoctorRepository(session_factory),
        patient=SqlPatientRepository(session_factory),
        hospital=SqlHospitalRepository(session_factory),
        appointment=SqlAppointmentRepository(session_factory),
        rating=SqlRatingRepository(session_factory),
    )
