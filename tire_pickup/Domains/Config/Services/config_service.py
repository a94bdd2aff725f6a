from loguru import logger

from tire_pickup.Domains.Config.Models.business_config import BusinessConfig
from tire_pickup.Domains.Config.Repositories.config_repository import ConfigRepository


class ConfigService:
    def __init__(self, repository: ConfigRepository):
        self.repository = repository

    async def get_config(self) -> BusinessConfig:
        """
        Returns the stored business config, writing the defaults first when
        nothing usable is stored yet.
        """
        config = await self.repository.get()
        if config is None:
            config = BusinessConfig()
            logger.info("No business config found, writing defaults")
            await self.repository.save(config)
        return config

    async def public_view(self) -> dict:
        config = await self.get_config()
        return config.to_json()
