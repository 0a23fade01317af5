"""Request/response schemas for hospitals."""

from typing import Optional

from pydantic import Field

from ...domain.entities import Hospital
from .common import CamelModel


class HospitalIn(CamelModel):
    hospital_name: str = Field(..., description="Hospital name")
    hospital_address: str = Field(..., description="Postal address")
    departments: str = Field(..., description="Departments, free text")
    email: Optional[str] = Field(None, description="Email, unique per collection")
    phone_no: Optional[str] = Field(None, description="Phone number, unique per collection")
    password: str = Field(..., description="Password, stored as given")

    def to_domain(self) -> Hospital:
        return Hospital(
            hospital_name=self.hospital_name,
            hospital_address=self.hospital_address,
            departments=self.departments,
            email=self.email,
            phone_no=self.phone_no,
            password=self.password,
        )


class HospitalOut(HospitalIn):
    id: str

    @classmethod
    def from_domain(cls, hospital: Hospital) -> "HospitalOut":
        return cls(
            id=str(hospital.id),
            hospital_name=hospital.hospital_name,
            hospital_address=hospital.hospital_address,
            departments=hospital.departments,
            email=hospital.email,
            phone_no=hospital.phone_no,
            password=hospital.password,
        )
