"""Medical record request/response schemas."""

from __future__ import annotations

import uuid
from datetime import date

from pydantic import BaseModel, ConfigDict, EmailStr

from rme.api.schemas.common import Phone, Text


class CreateMedicalRecordRequest(BaseModel):
    nik: Text
    nrme: Text
    name: Text
    dob: date
    gender: Text
    hp: Phone
    email: EmailStr


class UpdateMedicalRecordRequest(BaseModel):
    """NIK is the record's identity and cannot be changed."""

    nrme: Text | None = None
    name: Text | None = None
    dob: date | None = None
    gender: Text | None = None
    hp: Phone | None = None
    email: EmailStr | None = None


class MedicalRecordResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    nik: str
    nrme: str
    name: str
    dob: date
    gender: str
    hp: str
    email: str
    last_visit_date: date
