"""MedicineDAO — medicines table operations."""

from rme.dao.base import BaseDAO
from rme.models.medicine import Medicine


class MedicineDAO(BaseDAO[Medicine]):
    model = Medicine
