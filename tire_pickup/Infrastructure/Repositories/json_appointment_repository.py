from tire_pickup.Domains.Appointment.Models.appointment import Appointment
from tire_pickup.Domains.Appointment.Repositories.appointment_repository import (
    AppointmentRepository,
)
from tire_pickup.Infrastructure.Repositories.json_collection_repository import (
    JsonCollectionRepository,
)


class JsonAppointmentRepository(JsonCollectionRepository[Appointment], AppointmentRepository):
    model = Appointment
