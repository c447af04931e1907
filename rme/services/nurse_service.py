"""NurseService."""

from __future__ import annotations

from typing import Any

from rme.dao.nurse_dao import NurseDAO
from rme.models.nurse import Nurse
from rme.services.base import CrudService
from rme.services.validation import validate_nip


class NurseService(CrudService[Nurse]):
    entity = "nurse"

    def __init__(self, dao: NurseDAO) -> None:
        super().__init__(dao)

    def validate(self, values: dict[str, Any]) -> None:
        if "nip" in values:
            validate_nip(values["nip"])
