"""Nurse request/response schemas."""

from __future__ import annotations

import uuid

from pydantic import BaseModel, ConfigDict

from rme.api.schemas.common import Text


class CreateNurseRequest(BaseModel):
    name: Text
    nip: Text
    status: Text = "active"


class UpdateNurseRequest(BaseModel):
    name: Text | None = None
    nip: Text | None = None
    status: Text | None = None


class NurseResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
    nip: str
    status: str
