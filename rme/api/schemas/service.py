"""Clinic service request/response schemas."""

from __future__ import annotations

import uuid

from pydantic import BaseModel, ConfigDict

from rme.api.schemas.common import Text


class CreateServiceRequest(BaseModel):
    name: Text
    category: Text
    sub_category: Text


class UpdateServiceRequest(BaseModel):
    name: Text | None = None
    category: Text | None = None
    sub_category: Text | None = None


class ServiceResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
    category: str
    sub_category: str
