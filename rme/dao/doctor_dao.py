"""DoctorDAO — doctors table operations."""

from rme.dao.base import BaseDAO
from rme.models.doctor import Doctor


class DoctorDAO(BaseDAO[Doctor]):
    model = Doctor
    unique_key = "nip"
