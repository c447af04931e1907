"""MedicalRecordService — patient records keyed by NIK."""

from __future__ import annotations

import uuid
from datetime import date
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from rme.dao.medical_record_dao import MedicalRecordDAO
from rme.models.medical_record import MedicalRecord
from rme.services.base import CrudService
from rme.services.validation import validate_nik


class MedicalRecordService(CrudService[MedicalRecord]):
    """Every create or update counts as a visit and stamps ``last_visit_date``."""

    entity = "medical record"

    def __init__(self, dao: MedicalRecordDAO) -> None:
        super().__init__(dao)

    def validate(self, values: dict[str, Any]) -> None:
        if "nik" in values:
            validate_nik(values["nik"])

    async def create(self, session: AsyncSession, **values: Any) -> MedicalRecord:
        values["last_visit_date"] = date.today()
        return await super().create(session, **values)

    async def update(self, session: AsyncSession, pk: uuid.UUID, **values: Any) -> MedicalRecord:
        values["last_visit_date"] = date.today()
        return await super().update(session, pk, **values)
