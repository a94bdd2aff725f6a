from typing import Any, Dict, List, Optional

from loguru import logger

from tire_pickup.Core.Exceptions.errors import (
    CapacityExceeded,
    DateUnavailable,
    InvalidTimeWindow,
    NotFound,
    ValidationError,
)
from tire_pickup.Core.Utils.fields import clean_str, coerce_tires_count, normalize_date_only
from tire_pickup.Domains.Appointment.Models.appointment import APPOINTMENT_STATUSES, Appointment
from tire_pickup.Domains.Appointment.Repositories.appointment_repository import (
    AppointmentRepository,
)
from tire_pickup.Domains.Config.Services.config_service import ConfigService

CONTACT_FIELDS = ("company_name", "name", "email", "phone", "address", "city", "state", "zip")

# Admin patches may touch these and nothing else; other keys are dropped.
PATCHABLE_FIELDS = ("status", "notes", *CONTACT_FIELDS, "date", "time_window", "tires_count")


def count_active(appointments: List[Appointment], date: str) -> int:
    return sum(1 for a in appointments if a.date == date and a.is_active)


class AppointmentService:
    def __init__(self, repository: AppointmentRepository, config_service: ConfigService):
        self.repository = repository
        self.config_service = config_service

    async def create_appointment(self, data: Dict[str, Any]) -> Appointment:
        """
        Validates a public pickup request and books it.

        Raises ValidationError, InvalidTimeWindow, DateUnavailable or
        CapacityExceeded; nothing is written unless every check passes.
        """
        fields = {key: clean_str(data.get(key)) for key in CONTACT_FIELDS}
        date = normalize_date_only(clean_str(data.get("date")))
        time_window = clean_str(data.get("time_window"))

        missing = [key for key in ("company_name", "name", "address", "zip") if not fields[key]]
        if missing or not (fields["email"] or fields["phone"]) or not date:
            raise ValidationError("Missing required fields")

        config = await self.config_service.get_config()
        if time_window and not config.has_time_window(time_window):
            raise InvalidTimeWindow()
        if config.is_blackout(date):
            logger.warning(f"Refused appointment on blackout date {date}")
            raise DateUnavailable()

        async with self.repository.batch() as appointments:
            if count_active(appointments, date) >= config.capacity_per_day:
                logger.warning(f"Refused appointment on {date}: capacity {config.capacity_per_day} reached")
                raise CapacityExceeded()

            appointment = Appointment(
                **fields,
                date=date,
                time_window=time_window,
                tires_count=coerce_tires_count(data.get("tires_count")),
                notes=clean_str(data.get("notes")),
            )
            appointments.append(appointment)

        logger.info(f"Booked appointment {appointment.id} on {date}")
        return appointment

    async def list_appointments(
        self,
        date: Optional[str] = None,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
    ) -> List[Appointment]:
        appointments = await self.repository.list_all()

        date = normalize_date_only(date)
        if date:
            return [a for a in appointments if a.date == date]

        start_date = normalize_date_only(start_date)
        end_date = normalize_date_only(end_date)
        if start_date:
            appointments = [a for a in appointments if a.date >= start_date]
        if end_date:
            appointments = [a for a in appointments if a.date <= end_date]
        return appointments

    async def count_active_on(self, date: str) -> int:
        return count_active(await self.repository.list_all(), date)

    async def get_appointment(self, appointment_id: str) -> Appointment:
        appointment = await self.repository.get(appointment_id)
        if not appointment:
            raise NotFound("Appointment not found")
        return appointment

    async def update_appointment(self, appointment_id: str, updates: Dict[str, Any]) -> Appointment:
        # Date, window and capacity are deliberately not re-checked here.
        changes = {key: value for key, value in updates.items() if key in PATCHABLE_FIELDS}
        if "status" in changes and changes["status"] not in APPOINTMENT_STATUSES:
            raise ValidationError("Invalid status")
        if "tires_count" in changes:
            changes["tires_count"] = coerce_tires_count(changes["tires_count"])
        for key, value in changes.items():
            if value is None:
                changes[key] = ""

        async with self.repository.batch() as appointments:
            idx = _index_of(appointments, appointment_id)
            updated_data = appointments[idx].model_dump()
            updated_data.update(changes)
            appointments[idx] = Appointment(**updated_data)
            updated = appointments[idx]

        logger.info(f"Updated appointment {appointment_id}: {sorted(changes)}")
        return updated

    async def delete_appointment(self, appointment_id: str) -> None:
        async with self.repository.batch() as appointments:
            idx = _index_of(appointments, appointment_id)
            del appointments[idx]
        logger.info(f"Deleted appointment {appointment_id}")


def _index_of(appointments: List[Appointment], appointment_id: str) -> int:
    for idx, appointment in enumerate(appointments):
        if appointment.id == appointment_id:
            return idx
    raise NotFound("Appointment not found")
