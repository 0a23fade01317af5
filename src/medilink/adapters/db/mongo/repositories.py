"""
MongoDB implementations of the entity repositories.

Documents are keyed by a store-generated ObjectId; the domain sees its hex
string as an opaque ``EntityId``.
"""

import logging
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ASCENDING
from pymongo.errors import PyMongoError

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
)
from ....domain.value_objects.entity_id import EntityId
from . import documents
from .documents import UNIQUE_FIELDS, to_object_id

logger = logging.getLogger(__name__)

T = TypeVar("T")


class MongoRepository(Generic[T]):
    """Shared CRUD logic over one collection named by ``storage_key``."""

    to_document: Callable[[T], Dict[str, Any]]
    from_document: Callable[[Dict[str, Any]], T]

    def __init__(self, database: AsyncIOMotorDatabase):
        self._collection = database[self.storage_key]

    def _fail(self, operation: str, exc: PyMongoError, entity_id: Optional[EntityId] = None) -> DatabaseError:
        details = {"operation": operation, "storage_key": self.storage_key}
        if entity_id is not None:
            details["id"] = entity_id.value
        logger.error(f"MongoDB {operation} failed on '{self.storage_key}': {exc}")
        return DatabaseError(f"Failed to {operation} {self.storage_key}: {exc.__class__.__name__}", details)

    async def create(self, entity: T) -> T:
        doc = self.to_document(entity)
        try:
            result = await self._collection.insert_one(doc)
        except PyMongoError as exc:
            raise self._fail("create", exc) from exc
        created = self.from_document({**doc, "_id": result.inserted_id})
        logger.info(f"Created {self.storage_key} {created.id}")
        return created

    async def find_by_id(self, entity_id: EntityId) -> Optional[T]:
        oid = to_object_id(entity_id)
        if oid is None:
            return None
        try:
            doc = await self._collection.find_one({"_id": oid})
        except PyMongoError as exc:
            raise self._fail("read", exc, entity_id) from exc
        if doc is None:
            return None
        return self.from_document(doc)

    async def find_all(self) -> List[T]:
        try:
            docs = await self._collection.find({}).sort("_id", ASCENDING).to_list(length=None)
        except PyMongoError as exc:
            raise self._fail("list", exc) from exc
        return [self.from_document(doc) for doc in docs]

    async def update(self, entity_id: EntityId, entity: T) -> Optional[T]:
        oid = to_object_id(entity_id)
        if oid is None:
            return None
        doc = self.to_document(entity)
        try:
            result = await self._collection.replace_one({"_id": oid}, doc)
        except PyMongoError as exc:
            raise self._fail("update", exc, entity_id) from exc
        if result.matched_count == 0:
            return None
        logger.info(f"Updated {self.storage_key} {entity_id}")
        return self.from_document({**doc, "_id": oid})

    async def delete(self, entity_id: EntityId) -> bool:
        oid = to_object_id(entity_id)
        if oid is None:
            return False
        try:
            result = await self._collection.delete_one({"_id": oid})
        except PyMongoError as exc:
            raise self._fail("delete", exc, entity_id) from exc
        if result.deleted_count == 0:
            return False
        logger.info(f"Deleted {self.storage_key} {entity_id}")
        return True


class MongoAdminRepository(MongoRepository[Admin], AdminRepository):
    to_document = staticmethod(documents.admin_to_document)
    from_document = staticmethod(documents.admin_from_document)


class MongoDoctorRepository(MongoRepository[Doctor], DoctorRepository):
    to_document = staticmethod(documents.doctor_to_document)
    from_document = staticmethod(documents.doctor_from_document)


class MongoPatientRepository(MongoRepository[Patient], PatientRepository):
    to_document = staticmethod(documents.patient_to_document)
    from_document = staticmethod(documents.patient_from_document)


class MongoHospitalRepository(MongoRepository[Hospital], HospitalRepository):
    to_document = staticmethod(documents.hospital_to_document)
    from_document = staticmethod(documents.hospital_from_document)


class MongoAppointmentRepository(MongoRepository[Appointment], AppointmentRepository):
    to_document = staticmethod(documents.appointment_to_document)
    from_document = staticmethod(documents.appointment_from_document)


class MongoRatingRepository(MongoRepository[Rating], RatingRepository):
    to_document = staticmethod(documents.rating_to_document)
    from_document = staticmethod(documents.rating_from_document)


async def ensure_indexes(database: AsyncIOMotorDatabase) -> None:
    """Create the sparse unique indexes backing email/phone uniqueness."""
    for storage_key, unique_fields in UNIQUE_FIELDS.items():
        for field_name in unique_fields:
            await database[storage_key].create_index(
                [(field_name, ASCENDING)], unique=True, sparse=True
            )
    logger.info("MongoDB unique indexes ensured")


def build_mongo_repositories(database: AsyncIOMotorDatabase) -> Repositories:
    """Bundle the document repositories around one database handle."""
    return Repositories(
        admin=MongoAdminRepository(database),
        doctor=MongoDoctorRepository(database),
        patient=MongoPatientRepository(database),
        hospital=MongoHospitalRepository(database),
        appointment=MongoAppointmentRepository(database),
        rating=MongoRatingRepository(database),
    )
