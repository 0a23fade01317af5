"""Mapping between domain entities and MongoDB documents.

Documents use camelCase field names
(``firstName``, ``hospitalName``, ``phoneNo``...). Optional fields that are
unset are left out so sparse unique indexes ignore them.
"""

from typing import Any, Dict, Optional

from bson import ObjectId

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

# Unique fields per collection, mirrored by the relational UNIQUE columns.
UNIQUE_FIELDS = {
    "admin": ("email", "phone"),
    "doctor": ("email", "phone"),
    "patient": ("email", "phone"),
    "hospital": ("email", "phoneNo"),
    "appointment": (),
    "rating": (),
}


def _compact(doc: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in doc.items() if v is not None}


def _doc_id(doc: Dict[str, Any]) -> EntityId:
    return EntityId.of(doc["_id"])


def user_to_document(user: UserFields) -> Dict[str, Any]:
    return {
        "firstName": user.first_name,
        "lastName": user.last_name,
        "email": user.email,
        "phone": user.phone,
        "password": user.password,
        "description": user.description,
    }


def user_from_document(doc: Dict[str, Any]) -> UserFields:
    return UserFields(
        first_name=doc.get("firstName", ""),
        last_name=doc.get("lastName", ""),
        email=doc.get("email"),
        phone=doc.get("phone"),
        password=doc.get("password", ""),
        description=doc.get("description"),
    )


def admin_to_document(admin: Admin) -> Dict[str, Any]:
    return _compact(user_to_document(admin.user))


def admin_from_document(doc: Dict[str, Any]) -> Admin:
    return Admin(user=user_from_document(doc), id=_doc_id(doc))


def doctor_to_document(doctor: Doctor) -> Dict[str, Any]:
    return _compact({
        **user_to_document(doctor.user),
        "specialisation": doctor.specialisation,
        "hospitalName": doctor.hospital_name,
    })


def doctor_from_document(doc: Dict[str, Any]) -> Doctor:
    return Doctor(
        user=user_from_document(doc),
        specialisation=doc.get("specialisation", ""),
        hospital_name=doc.get("hospitalName", ""),
        id=_doc_id(doc),
    )


def patient_to_document(patient: Patient) -> Dict[str, Any]:
    return _compact(user_to_document(patient.user))


def patient_from_document(doc: Dict[str, Any]) -> Patient:
    return Patient(user=user_from_document(doc), id=_doc_id(doc))


def hospital_to_document(hospital: Hospital) -> Dict[str, Any]:
    return _compact({
        "hospitalName": hospital.hospital_name,
        "hospitalAddress": hospital.hospital_address,
        "departments": hospital.departments,
        "email": hospital.email,
        "phoneNo": hospital.phone_no,
        "password": hospital.password,
    })


def hospital_from_document(doc: Dict[str, Any]) -> Hospital:
    return Hospital(
        hospital_name=doc.get("hospitalName", ""),
        hospital_address=doc.get("hospitalAddress", ""),
        departments=doc.get("departments", ""),
        email=doc.get("email"),
        phone_no=doc.get("phoneNo"),
        password=doc.get("password", ""),
        id=_doc_id(doc),
    )


def appointment_to_document(appointment: Appointment) -> Dict[str, Any]:
    return _compact({
        "date": appointment.date,
        "time": appointment.time,
        "doctorName": appointment.doctor_name,
        "hospitalName": appointment.hospital_name,
    })


def appointment_from_document(doc: Dict[str, Any]) -> Appointment:
    return Appointment(
        date=doc.get("date", ""),
        time=doc.get("time", ""),
        doctor_name=doc.get("doctorName", ""),
        hospital_name=doc.get("hospitalName", ""),
        id=_doc_id(doc),
    )


def rating_to_document(rating: Rating) -> Dict[str, Any]:
    return _compact({
        "rating": rating.rating,
        "comment": rating.comment,
        "date": rating.date,
        "time": rating.time,
    })


def rating_from_document(doc: Dict[str, Any]) -> Rating:
    return Rating(
        rating=doc.get("rating", 0),
        comment=doc.get("comment"),
        date=doc.get("date", 0),
        time=doc.get("time", 0),
        id=_doc_id(doc),
    )


def to_object_id(entity_id: EntityId) -> Optional[ObjectId]:
    """ObjectId for a well-formed key, None otherwise."""
    if ObjectId.is_valid(entity_id.value):
        return ObjectId(entity_id.value)
    return None
