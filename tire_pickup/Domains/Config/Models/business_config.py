from typing import List

from pydantic import Field

from tire_pickup.Core.Models.base import CamelModel


class BusinessConfig(CamelModel):
    business_name: str = "Used Tire Pickup Co."
    business_phone: str = "(555) 123-4567"
    capacity_per_day: int = 15
    time_windows: List[str] = Field(
        default_factory=lambda: ["8-11 AM", "11 AM-2 PM", "2-5 PM"]
    )
    blackout_dates: List[str] = Field(default_factory=list)
    timezone: str = "America/New_York"

    def is_blackout(self, date: str) -> bool:
        return date in self.blackout_dates

    def has_time_window(self, time_window: str) -> bool:
        return time_window in self.time_windows
