from abc import ABC, abstractmethod
from typing import Optional

from tire_pickup.Domains.Config.Models.business_config import BusinessConfig


class ConfigRepository(ABC):
    @abstractmethod
    async def get(self) -> Optional[BusinessConfig]:
        pass

    @abstractmethod
    async def save(self, config: BusinessConfig) -> BusinessConfig:
        pass
