from typing import Optional

from loguru import logger
from pydantic import ValidationError

from tire_pickup.Domains.Config.Models.business_config import BusinessConfig
from tire_pickup.Domains.Config.Repositories.config_repository import ConfigRepository
from tire_pickup.Infrastructure.Storage.json_file import JsonFile


class JsonConfigRepository(ConfigRepository):
    def __init__(self, data_path: str):
        self.file = JsonFile(data_path)

    async def get(self) -> Optional[BusinessConfig]:
        data = await self.file.read(default=None)
        if not isinstance(data, dict):
            return None
        try:
            return BusinessConfig(**data)
        except ValidationError as e:
            logger.warning(f"Ignoring malformed config in {self.file.path}: {e}")
            return None

    async def save(self, config: BusinessConfig) -> BusinessConfig:
        async with self.file.lock:
            await self.file.write(config.to_json())
        return config
