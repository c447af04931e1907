"""AppointmentDAO — appointments table operations."""

from rme.dao.base import BaseDAO
from rme.models.appointment import Appointment


class AppointmentDAO(BaseDAO[Appointment]):
    model = Appointment
