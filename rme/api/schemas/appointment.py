"""Appointment request/response schemas."""

from __future__ import annotations

import datetime as dt
import uuid

from pydantic import BaseModel, ConfigDict

from rme.api.schemas.common import Text


class CreateAppointmentRequest(BaseModel):
    patient_id: Text
    doctor_id: Text
    date: dt.date
    time: dt.time
    status: Text = "scheduled"


class UpdateAppointmentRequest(BaseModel):
    patient_id: Text | None = None
    doctor_id: Text | None = None
    date: dt.date | None = None
    time: dt.time | None = None
    status: Text | None = None


class AppointmentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    patient_id: str
    doctor_id: str
    date: dt.date
    time: dt.time
    status: str
