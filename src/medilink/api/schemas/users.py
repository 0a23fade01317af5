"""
Request/response schemas for admins, doctors and patients.

The wire format is flat: the embedded user fields sit next to the
entity's own fields in the JSON payloads.
"""

from typing import Optional

from pydantic import Field

from ...domain.entities import Admin, Doctor, Patient, UserFields
from .common import CamelModel


class UserIn(CamelModel):
    first_name: str = Field(..., description="First name")
    last_name: str = Field(..., description="Last name")
    email: Optional[str] = Field(None, description="Email, unique per collection")
    phone: Optional[str] = Field(None, description="Phone, unique per collection")
    password: str = Field(..., description="Password, stored as given")
    description: Optional[str] = Field(None, description="Free-text description")

    def to_user_fields(self) -> UserFields:
        return UserFields(
            first_name=self.first_name,
            last_name=self.last_name,
            email=self.email,
            phone=self.phone,
            password=self.password,
            description=self.description,
        )


def _user_kwargs(user: UserFields) -> dict:
    return {
        "first_name": user.first_name,
        "last_name": user.last_name,
        "email": user.email,
        "phone": user.phone,
        "password": user.password,
        "description": user.description,
    }


class AdminIn(UserIn):
    def to_domain(self) -> Admin:
        return Admin(user=self.to_user_fields())


class AdminOut(AdminIn):
    id: str

    @classmethod
    def from_domain(cls, admin: Admin) -> "AdminOut":
        return cls(id=str(admin.id), **_user_kwargs(admin.user))


class PatientIn(UserIn):
    def to_domain(self) -> Patient:
        return Patient(user=self.to_user_fields())


class PatientOut(PatientIn):
    id: str

    @classmethod
    def from_domain(cls, patient: Patient) -> "PatientOut":
        return cls(id=str(patient.id), **_user_kwargs(patient.user))


class DoctorIn(UserIn):
    specialisation: str = Field(..., description="Medical specialisation")
    hospital_name: str = Field(..., description="Hospital name (free text, not a reference)")

    def to_domain(self) -> Doctor:
        return Doctor(
            user=self.to_user_fields(),
            specialisation=self.specialisation,
            hospital_name=self.hospital_name,
        )


class DoctorOut(DoctorIn):
    id: str

    @classmethod
    def from_domain(cls, doctor: Doctor) -> "DoctorOut":
        return cls(
            id=str(doctor.id),
            specialisation=doctor.specialisation,
            hospital_name=doctor.hospital_name,
            **_user_kwargs(doctor.user),
        )
