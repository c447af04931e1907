"""Insurance request/response schemas."""

from __future__ import annotations

import uuid

from pydantic import BaseModel, ConfigDict

from rme.api.schemas.common import Text


class CreateInsuranceRequest(BaseModel):
    name: Text
    type: Text
    code: Text
    status: Text = "active"


class UpdateInsuranceRequest(BaseModel):
    name: Text | None = None
    type: Text | None = None
    code: Text | None = None
    status: Text | None = None


class InsuranceResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
    type: str
    code: str
    status: str
