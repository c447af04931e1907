"""DoctorService."""

from __future__ import annotations

from typing import Any

from rme.dao.doctor_dao import DoctorDAO
from rme.models.doctor import Doctor
from rme.services.base import CrudService
from rme.services.validation import validate_nip


class DoctorService(CrudService[Doctor]):
    entity = "doctor"

    def __init__(self, dao: DoctorDAO) -> None:
        super().__init__(dao)

    def validate(self, values: dict[str, Any]) -> None:
        if "nip" in values:
            validate_nip(values["nip"])
