"""Request/response schemas for appointments and ratings."""

from typing import Optional

from pydantic import Field

from ...domain.entities import Appointment, Rating
from .common import CamelModel


class AppointmentIn(CamelModel):
    date: str = Field(..., description="Appointment date")
    time: str = Field(..., description="Appointment time")
    doctor_name: str = Field(..., description="Doctor name (free text)")
    hospital_name: str = Field(..., description="Hospital name (free text)")

    def to_domain(self) -> Appointment:
        return Appointment(
            date=self.date,
            time=self.time,
            doctor_name=self.doctor_name,
            hospital_name=self.hospital_name,
        )


class AppointmentOut(AppointmentIn):
    id: str

    @classmethod
    def from_domain(cls, appointment: Appointment) -> "AppointmentOut":
        return cls(
            id=str(appointment.id),
            date=appointment.date,
            time=appointment.time,
            doctor_name=appointment.doctor_name,
            hospital_name=appointment.hospital_name,
        )


class RatingIn(CamelModel):
    rating: int = Field(..., description="Numeric rating")
    comment: Optional[str] = Field(None, description="Optional comment")
    date: int = Field(..., description="Date as an integer")
    time: int = Field(..., description="Time as an integer")

    def to_domain(self) -> Rating:
        return Rating(
            rating=self.rating,
            comment=self.comment,
            date=self.date,
            time=self.time,
        )


class RatingOut(RatingIn):
    id: str

    @classmethod
    def from_domain(cls, rating: Rating) -> "RatingOut":
        return cls(
            id=str(rating.id),
            rating=rating.rating,
            comment=rating.comment,
            date=rating.date,
            time=rating.time,
        )
