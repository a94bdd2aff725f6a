from abc import ABC, abstractmethod
from typing import AsyncContextManager, List, Optional

from tire_pickup.Domains.Account.Models.account import Account


class AccountRepository(ABC):
    @abstractmethod
    async def list_all(self) -> List[Account]:
        pass

    @abstractmethod
    async def get(self, account_id: str) -> Optional[Account]:
        pass

    @abstractmethod
    def batch(self) -> AsyncContextManager[List[Account]]:
        """Exclusive read-modify-write over the whole collection (see AppointmentRepository.batch)."""
        pass
