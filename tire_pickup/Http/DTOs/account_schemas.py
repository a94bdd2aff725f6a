from typing import Any, List, Optional

from tire_pickup.Core.Models.base import CamelModel
from tire_pickup.Domains.Account.Models.account import Account, Notification
from tire_pickup.Http.DTOs.common_schemas import RequestDTO

# --- Requests ---


class AccountFromAppointmentRequest(RequestDTO):
    appointment_id: Optional[str] = None
    notes: Optional[str] = None


class PublicAccountCreateRequest(RequestDTO):
    company: Optional[str] = None
    contact_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip: Optional[str] = None
    notes: Optional[str] = None


class AccountPatchRequest(RequestDTO):
    company: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip: Optional[str] = None
    notes: Optional[str] = None


class NotificationCreateRequest(RequestDTO):
    message: Optional[str] = None
    date: Optional[str] = None
    recurring: bool = False
    recurrence_weeks: Any = 1


class NotificationPatchRequest(RequestDTO):
    message: Optional[str] = None
    date: Optional[str] = None
    recurring: Optional[bool] = None
    recurrence_weeks: Any = None


# --- Responses ---


class AccountResponse(CamelModel):
    account: Account


class AccountListResponse(CamelModel):
    accounts: List[Account]


class NotificationResponse(CamelModel):
    notification: Notification
