from abc import ABC, abstractmethod
from typing import AsyncContextManager, List, Optional

from tire_pickup.Domains.Appointment.Models.appointment import Appointment


class AppointmentRepository(ABC):
    @abstractmethod
    async def list_all(self) -> List[Appointment]:
        pass

    @abstractmethod
    async def get(self, appointment_id: str) -> Optional[Appointment]:
        pass

    @abstractmethod
    def batch(self) -> AsyncContextManager[List[Appointment]]:
        """
        Exclusive read-modify-write over the whole collection.

        Yields the loaded list; mutations are persisted when the block exits
        normally and discarded if it raises.
        """
        pass
