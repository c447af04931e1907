"""ORM models — import all so that Base.metadata sees every table."""

from rme.models.appointment import Appointment
from rme.models.doctor import Doctor
from rme.models.file import File
from rme.models.insurance import Insurance
from rme.models.medical_record import MedicalRecord
from rme.models.medicine import Medicine
from rme.models.nurse import Nurse
from rme.models.service import Service

__all__ = [
    "Appointment",
    "Doctor",
    "File",
    "Insurance",
    "MedicalRecord",
    "Medicine",
    "Nurse",
    "Service",
]
