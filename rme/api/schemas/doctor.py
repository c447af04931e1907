"""Doctor request/response schemas."""

from __future__ import annotations

import uuid

from pydantic import BaseModel, ConfigDict

from rme.api.schemas.common import Text


class CreateDoctorRequest(BaseModel):
    name: Text
    nip: Text
    sip: Text
    specialization: Text
    status: Text = "active"


class UpdateDoctorRequest(BaseModel):
    name: Text | None = None
    nip: Text | None = None
    sip: Text | None = None
    specialization: Text | None = None
    status: Text | None = None


class DoctorResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
    nip: str
    sip: str
    specialization: str
    status: str
