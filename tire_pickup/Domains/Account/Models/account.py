from datetime import datetime
from typing import List, Optional

from pydantic import Field

from tire_pickup.Core.Models.base import CamelModel, generate_id, utcnow


# Value Object
class Notification(CamelModel):
    id: str = Field(default_factory=lambda: generate_id("ntf_"))
    message: str
    date: str
    created_at: datetime = Field(default_factory=utcnow)
    sent: bool = False
    recurring: bool = False
    recurrence_weeks: int = 1
    parent_id: Optional[str] = None


# Aggregate Root
class Account(CamelModel):
    id: str = Field(default_factory=lambda: generate_id("acc_"))
    created_at: datetime = Field(default_factory=utcnow)

    company: Optional[str] = ""
    name: Optional[str] = ""
    email: Optional[str] = ""
    phone: Optional[str] = ""
    address: Optional[str] = ""
    city: Optional[str] = ""
    state: Optional[str] = ""
    zip: Optional[str] = ""

    total_pickups: int = 0
    last_pickup: Optional[str] = None
    notifications: List[Notification] = Field(default_factory=list)
    notes: Optional[str] = ""

    def find_notification(self, notification_id: str) -> Optional[Notification]:
        for notification in self.notifications:
            if notification.id == notification_id:
                return notification
        return None
