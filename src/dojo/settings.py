from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


class Settings(BaseSettings):
    """Process configuration read from ``DOJO_*`` environment variables and ``.env``."""

    model_config = SettingsConfigDict(env_prefix="DOJO_", env_file=".env", extra="ignore")

    host: str = "127.0.0.1"
    port: int = Field(default=3000, ge=0, le=65535)
    log_level: LogLevel = "INFO"
    greeting: str = Field(default="base route. Hello World Fellas", min_length=1)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
