"""MedicalRecordDAO — medical_records table operations."""

from rme.dao.base import BaseDAO
from rme.models.medical_record import MedicalRecord


class MedicalRecordDAO(BaseDAO[MedicalRecord]):
    model = MedicalRecord
    unique_key = "nik"
