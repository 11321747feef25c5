import logging
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["critical", "error", "warning", "info", "debug", "trace"]


class ServerSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="KEYSMITH_", extra="ignore")

    host: str = "127.0.0.1"
    port: int = 8000
    reload: bool = False
    log_level: LogLevel = "info"

    @property
    def logging_level(self) -> int:
        """Standard logging level for ``log_level``; uvicorn's trace maps to DEBUG."""
        if self.log_level == "trace":
            return logging.DEBUG
        return logging.getLevelName(self.log_level.upper())
