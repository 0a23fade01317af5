"""SQLAlchemy table models, one table per entity with integer surrogate keys."""

from typing import Optional

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class UserColumns:
    """Columns shared by the admin, doctor and patient tables."""

    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[Optional[str]] = mapped_column(String(254), unique=True)
    phone: Mapped[Optional[str]] = mapped_column(String(32), unique=True)
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text)


class AdminRow(UserColumns, Base):
    __tablename__ = "admin"

    admin_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)


class DoctorRow(UserColumns, Base):
    __tablename__ = "doctor"

    doctor_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    specialisation: Mapped[str] = mapped_column(String(100), nullable=False)
    hospital_name: Mapped[str] = mapped_column(String(200), nullable=False)


class PatientRow(UserColumns, Base):
    __tablename__ = "patient"

    patient_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)


class HospitalRow(Base):
    __tablename__ = "hospital"

    hospital_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    hospital_name: Mapped[str] = mapped_column(String(200), nullable=False)
    hospital_address: Mapped[str] = mapped_column(String(500), nullable=False)
    departments: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[Optional[str]] = mapped_column(String(254), unique=True)
    phone_no: Mapped[Optional[str]] = mapped_column(String(32), unique=True)
    password: Mapped[str] = mapped_column(String(255), nullable=False)


class AppointmentRow(Base):
    __tablename__ = "appointment"

    appointment_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    date: Mapped[str] = mapped_column(String(32), nullable=False)
    time: Mapped[str] = mapped_column(String(32), nullable=False)
    doctor_name: Mapped[str] = mapped_column(String(200), nullable=False)
    hospital_name: Mapped[str] = mapped_column(String(200), nullable=False)


class RatingRow(Base):
    __tablename__ = "rating"

    rating_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    rating: Mapped[int] = mapped_column(Integer, nullable=False)
    comment: Mapped[Optional[str]] = mapped_column(Text)
    date: Mapped[int] = mapped_column(Integer, nullable=False)
    time: Mapped[int] = mapped_column(Integer, nullable=False)
