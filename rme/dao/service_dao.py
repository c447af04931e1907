"""ServiceDAO — services table operations."""

from rme.dao.base import BaseDAO
from rme.models.service import Service


class ServiceDAO(BaseDAO[Service]):
    model = Service
