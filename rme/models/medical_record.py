"""medical_records table."""

from datetime import date

from sqlalchemy import Date, Text
from sqlalchemy.orm import Mapped, mapped_column

from rme.core.database import Base, IdMixin, TimestampMixin


class MedicalRecord(IdMixin, TimestampMixin, Base):
    __tablename__ = "medical_records"

    nrme: Mapped[str] = mapped_column(Text, nullable=False)
    nik: Mapped[str] = mapped_column(Text, unique=True, nullable=False)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    dob: Mapped[date] = mapped_column(Date, nullable=False)
    gender: Mapped[str] = mapped_column(Text, nullable=False)
    hp: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(Text, nullable=False)
    last_visit_date: Mapped[date] = mapped_column(Date, nullable=False)
