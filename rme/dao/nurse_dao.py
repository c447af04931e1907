"""NurseDAO — nurses table operations."""

from rme.dao.base import BaseDAO
from rme.models.nurse import Nurse


class NurseDAO(BaseDAO[Nurse]):
    model = Nurse
    unique_key = "nip"
