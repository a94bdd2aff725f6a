from typing import Any, List, Optional

from tire_pickup.Core.Models.base import CamelModel
from tire_pickup.Domains.Appointment.Models.appointment import Appointment
from tire_pickup.Http.DTOs.common_schemas import RequestDTO

# --- Requests ---


class AppointmentCreateRequest(RequestDTO):
    company_name: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip: Optional[str] = None
    date: Optional[str] = None
    time_window: Optional[str] = None
    tires_count: Any = None
    notes: Optional[str] = None


class AppointmentPatchRequest(AppointmentCreateRequest):
    status: Optional[str] = None


# --- Responses ---


class AppointmentCreatedResponse(CamelModel):
    confirmation: str
    appointment: Appointment


class AppointmentResponse(CamelModel):
    appointment: Appointment


class AppointmentListResponse(CamelModel):
    appointments: List[Appointment]
