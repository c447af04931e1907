"""InsuranceService — payers, unique by code."""

from rme.dao.insurance_dao import InsuranceDAO
from rme.models.insurance import Insurance
from rme.services.base import CrudService


class InsuranceService(CrudService[Insurance]):
    entity = "insurance"

    def __init__(self, dao: InsuranceDAO) -> None:
        super().__init__(dao)
