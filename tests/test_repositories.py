"""
Repository contract tests, run against both storage backends.
"""

import copy

import pytest

from medilink.adapters.db.sql.models import AdminRow
from medilink.adapters.db.sql.repositories import SqlRepository
from medilink.application.ports.repositories import AdminRepository
from medilink.core.exceptions import DatabaseError
from medilink.domain.entities import (
    Admin,
    Doctor,
    Appointment,
    Hospital,
    Patient,
    Rating,
    UserFields,
)
from medilink.domain.value_objects import EntityId


@pytest.mark.asyncio
async def test_create_assigns_id_and_keeps_fields(repositories, john_doe):
    created = await repositories.admin.create(john_doe)

    assert created.id is not None
    assert created.id.value not in ("", "0")
    assert created.user == john_doe.user
    # The input record is left untouched
    assert john_doe.id is None


@pytest.mark.asyncio
async def test_find_by_id_returns_created_record(repositories, john_doe):
    created = await repositories.admin.create(john_doe)

    found = await repositories.admin.find_by_id(created.id)

    assert found == created


@pytest.mark.asyncio
async def test_duplicate_email_is_rejected_by_store(repositories, john_doe):
    await repositories.admin.create(john_doe)
    duplicate = copy.deepcopy(john_doe)
    duplicate.user.phone = "456"

    with pytest.raises(DatabaseError) as exc_info:
        await repositories.admin.create(duplicate)

    assert exc_info.value.error_code == "DATABASE_ERROR"
    assert exc_info.value.details["storage_key"] == "admin"
    assert exc_info.value.__cause__ is not None
    assert len(await repositories.admin.find_all()) == 1


@pytest.mark.asyncio
async def test_duplicate_hospital_phone_is_rejected_by_store(repositories):
    first = Hospital("City", "1 Main St", "Cardiology", "city@x.com", "555", "pw")
    second = Hospital("Town", "2 Side St", "Oncology", "town@x.com", "555", "pw")
    await repositories.hospital.create(first)

    with pytest.raises(DatabaseError):
        await repositories.hospital.create(second)


@pytest.mark.asyncio
async def test_missing_email_and_phone_do_not_collide(repositories):
    first = Patient(user=UserFields("Ann", "Lee", password="pw"))
    second = Patient(user=UserFields("Bob", "Ray", password="pw"))

    await repositories.patient.create(first)
    await repositories.patient.create(second)

    assert len(await repositories.patient.find_all()) == 2


@pytest.mark.asyncio
async def test_delete_then_find_returns_not_found(repositories, john_doe):
    created = await repositories.admin.create(john_doe)

    assert await repositories.admin.delete(created.id) is True
    assert await repositories.admin.find_by_id(created.id) is None
    assert await repositories.admin.delete(created.id) is False


@pytest.mark.asyncio
async def test_update_changes_only_modified_fields(repositories, make_doctor):
    created = await repositories.doctor.create(make_doctor("house@x.com", "100"))
    changed = copy.deepcopy(created)
    changed.specialisation = "Nephrology"
    changed.user.description = "Head of department"

    updated = await repositories.doctor.update(created.id, changed)
    found = await repositories.doctor.find_by_id(created.id)

    assert updated == found
    assert found.id == created.id
    assert found.specialisation == "Nephrology"
    assert found.user.description == "Head of department"
    assert found.hospital_name == created.hospital_name
    assert found.user.first_name == created.user.first_name
    assert found.user.email == created.user.email
    assert found.user.password == created.user.password


@pytest.mark.asyncio
async def test_update_ignores_id_on_payload(repositories):
    created = await repositories.appointment.create(
        Appointment("2024-05-01", "10:00", "Dr. House", "General Hospital")
    )
    changed = Appointment("2024-05-02", "11:00", "Dr. House", "General Hospital", id=EntityId("999"))

    updated = await repositories.appointment.update(created.id, changed)

    assert updated.id == created.id
    assert updated.date == "2024-05-02"


@pytest.mark.asyncio
async def test_update_unknown_id_returns_none(repositories, john_doe):
    created = await repositories.admin.create(john_doe)
    await repositories.admin.delete(created.id)

    assert await repositories.admin.update(created.id, john_doe) is None


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "raw_id",
    ["not-an-id", "12ab", "ffffffffffffffffffffffff", "424242", "²", "99999999999999999999999"],
)
async def test_foreign_or_unknown_ids_are_not_found(repositories, raw_id):
    entity_id = EntityId(raw_id)

    assert await repositories.rating.find_by_id(entity_id) is None
    assert await repositories.rating.update(entity_id, Rating(5, None, 20240501, 930)) is None
    assert await repositories.rating.delete(entity_id) is False


@pytest.mark.asyncio
async def test_doctors_sharing_hospital_name_persist_independently(repositories, make_doctor):
    first = await repositories.doctor.create(make_doctor("a@x.com", "1"))
    second = await repositories.doctor.create(make_doctor("b@x.com", "2"))

    doctors = await repositories.doctor.find_all()

    assert first.id != second.id
    assert [d.id for d in doctors] == [first.id, second.id]
    assert {d.hospital_name for d in doctors} == {"General Hospital"}


@pytest.mark.asyncio
async def test_appointment_and_rating_are_not_checked_against_other_entities(repositories):
    appointment = await repositories.appointment.create(
        Appointment("2024-05-01", "10:00", "Nobody", "Nowhere Hospital")
    )
    rating = await repositories.rating.create(Rating(4, None, 20240501, 1000))

    assert await repositories.doctor.find_all() == []
    assert await repositories.hospital.find_all() == []
    assert (await repositories.appointment.find_by_id(appointment.id)).doctor_name == "Nobody"
    found_rating = await repositories.rating.find_by_id(rating.id)
    assert found_rating.comment is None
    assert found_rating.rating == 4


@pytest.mark.asyncio
async def test_collections_are_separate(repositories, john_doe):
    await repositories.admin.create(john_doe)

    # Same email in another collection is fine
    patient = await repositories.patient.create(Patient(user=copy.deepcopy(john_doe.user)))

    assert patient.user.email == "john@x.com"
    assert len(await repositories.admin.find_all()) == 1
    assert len(await repositories.patient.find_all()) == 1


@pytest.mark.asyncio
async def test_storage_keys(repositories):
    assert repositories.by_storage_key() == {
        "admin": repositories.admin,
        "doctor": repositories.doctor,
        "patient": repositories.patient,
        "hospital": repositories.hospital,
        "appointment": repositories.appointment,
        "rating": repositories.rating,
    }
    for key, repository in repositories.by_storage_key().items():
        assert repository.storage_key == key


def _full_user(tag: str) -> UserFields:
    return UserFields(
        first_name=f"First {tag}",
        last_name=f"Last {tag}",
        email=f"{tag}@x.com",
        phone=f"+1-{tag}",
        password=f"pw-{tag}",
        description=f"About {tag}",
    )


FULLY_POPULATED = {
    "admin": lambda: Admin(user=_full_user("admin")),
    "doctor": lambda: Doctor(
        user=_full_user("doctor"), specialisation="Cardiology", hospital_name="General Hospital"
    ),
    "patient": lambda: Patient(user=_full_user("patient")),
    "hospital": lambda: Hospital(
        hospital_name="General Hospital",
        hospital_address="1 Main St",
        departments="Cardiology, Oncology",
        email="info@general.org",
        phone_no="555-0100",
        password="pw-hospital",
    ),
    "appointment": lambda: Appointment("2024-05-01", "10:00", "Dr. House", "General Hospital"),
    "rating": lambda: Rating(rating=5, comment="Very kind", date=20240501, time=930),
}


@pytest.mark.asyncio
@pytest.mark.parametrize("storage_key", sorted(FULLY_POPULATED))
async def test_every_field_survives_create_and_find(repositories, storage_key):
    repository = repositories.by_storage_key()[storage_key]
    record = FULLY_POPULATED[storage_key]()

    created = await repository.create(record)
    found = await repository.find_by_id(created.id)

    assert created.id is not None
    assert found == created
    # Equal to the input in every field but the id
    record.id = created.id
    assert found == record


@pytest.mark.asyncio
async def test_update_into_another_records_email_is_rejected_by_store(repositories, make_doctor):
    first = await repositories.doctor.create(make_doctor("a@x.com", "1"))
    second = await repositories.doctor.create(make_doctor("b@x.com", "2"))
    second.user.email = first.user.email

    with pytest.raises(DatabaseError) as exc_info:
        await repositories.doctor.update(second.id, second)

    assert exc_info.value.details["operation"] == "update"
    assert exc_info.value.details["id"] == second.id.value
    assert (await repositories.doctor.find_by_id(second.id)).user.email == "b@x.com"


def test_sql_repository_without_mapping_hooks_cannot_be_built():
    class IncompleteAdminRepository(SqlRepository[Admin, AdminRow], AdminRepository):
        row_model = AdminRow
        pk_column = "admin_id"

        def _to_columns(self, entity):
            return {}

    with pytest.raises(TypeError):
        IncompleteAdminRepository(session_factory=None)
