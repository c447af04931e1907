"""AppointmentService."""

from rme.dao.appointment_dao import AppointmentDAO
from rme.models.appointment import Appointment
from rme.services.base import CrudService


class AppointmentService(CrudService[Appointment]):
    entity = "appointment"

    def __init__(self, dao: AppointmentDAO) -> None:
        super().__init__(dao)
