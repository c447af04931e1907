"""Medicine request/response schemas."""

from __future__ import annotations

import uuid
from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from rme.api.schemas.common import Text


class CreateMedicineRequest(BaseModel):
    master_medicine_id: Text
    batch_number: Text
    trade_name: Text
    production_date: date
    expired_date: date
    purchase_price: float = Field(ge=0)
    selling_price: float = Field(ge=0)
    qty: float = Field(ge=0)
    manufacturer: Text


class UpdateMedicineRequest(BaseModel):
    master_medicine_id: Text | None = None
    batch_number: Text | None = None
    trade_name: Text | None = None
    production_date: date | None = None
    expired_date: date | None = None
    purchase_price: float | None = Field(default=None, ge=0)
    selling_price: float | None = Field(default=None, ge=0)
    qty: float | None = Field(default=None, ge=0)
    manufacturer: Text | None = None


class MedicineResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    master_medicine_id: str
    batch_number: str
    trade_name: str
    production_date: date
    expired_date: date
    purchase_price: float
    selling_price: float
    qty: float
    manufacturer: str
