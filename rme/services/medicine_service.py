"""MedicineService."""

from __future__ import annotations

import uuid
from datetime import date
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from rme.dao.medicine_dao import MedicineDAO
from rme.models.medicine import Medicine
from rme.services import ValidationError
from rme.services.base import CrudService, storage_errors


def _check_dates(produced: date | None, expires: date | None) -> None:
    if produced is not None and expires is not None and expires < produced:
        raise ValidationError("expired_date must not be before production_date")


class MedicineService(CrudService[Medicine]):
    entity = "medicine"

    def __init__(self, dao: MedicineDAO) -> None:
        super().__init__(dao)

    def validate(self, values: dict[str, Any]) -> None:
        _check_dates(values.get("production_date"), values.get("expired_date"))

    async def update(self, session: AsyncSession, pk: uuid.UUID, **values: Any) -> Medicine:
        """A partial update is checked against the stored date it leaves unchanged."""
        produced, expires = values.get("production_date"), values.get("expired_date")
        if (produced is None) != (expires is None):
            with storage_errors():
                current = await self._dao.get_by_id(session, pk)
            if current is not None:
                _check_dates(produced or current.production_date, expires or current.expired_date)
        return await super().update(session, pk, **values)
