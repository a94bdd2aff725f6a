"""
Server configuration loaded from environment variables (and `.env` when present).
"""

import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ADMIN_PASSWORD = "changeme"


class ServerConfig(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000)
    reload: bool = Field(default=False)

    admin_password: str = Field(default=DEFAULT_ADMIN_PASSWORD)
    data_dir: str = Field(default=os.path.join(os.getcwd(), "data"))
    session_ttl_hours: int = Field(default=24)
    max_body_bytes: int = Field(default=1_000_000)

    log_level: str = Field(default="DEBUG")

    @property
    def uses_default_password(self) -> bool:
        return self.admin_password == DEFAULT_ADMIN_PASSWORD
