from datetime import datetime
from typing import Literal, Optional

from pydantic import Field

from tire_pickup.Core.Models.base import CamelModel, generate_id, utcnow

AppointmentStatus = Literal["scheduled", "completed", "cancelled"]
APPOINTMENT_STATUSES = ("scheduled", "completed", "cancelled")


class Appointment(CamelModel):
    id: str = Field(default_factory=lambda: generate_id("apt_"))
    created_at: datetime = Field(default_factory=utcnow)
    status: AppointmentStatus = "scheduled"

    company_name: Optional[str] = ""
    name: Optional[str] = ""
    email: Optional[str] = ""
    phone: Optional[str] = ""
    address: Optional[str] = ""
    city: Optional[str] = ""
    state: Optional[str] = ""
    zip: Optional[str] = ""

    date: str
    time_window: Optional[str] = ""
    tires_count: int = 0
    notes: Optional[str] = ""

    @property
    def is_active(self) -> bool:
        return self.status != "cancelled"
