"""ServiceService — the catalogue of clinic services."""

from rme.dao.service_dao import ServiceDAO
from rme.models.service import Service
from rme.services.base import CrudService


class ServiceService(CrudService[Service]):
    entity = "service"

    def __init__(self, dao: ServiceDAO) -> None:
        super().__init__(dao)
