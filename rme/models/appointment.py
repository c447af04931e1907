"""appointments table."""

import datetime as dt

from sqlalchemy import Date, Text, Time, text
from sqlalchemy.orm import Mapped, mapped_column

from rme.core.database import Base, IdMixin, TimestampMixin


class Appointment(IdMixin, TimestampMixin, Base):
    __tablename__ = "appointments"

    # Free-form references, no foreign keys.
    patient_id: Mapped[str] = mapped_column(Text, nullable=False)
    doctor_id: Mapped[str] = mapped_column(Text, nullable=False)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False)
    time: Mapped[dt.time] = mapped_column(Time, nullable=False)
    status: Mapped[str] = mapped_column(Text, nullable=False, server_default=text("'scheduled'"))
