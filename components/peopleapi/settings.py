from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class PeopleSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="PEOPLE_", env_file=".env", case_sensitive=False, extra="ignore")

    app_name: str = Field(default="people-service")
    app_version: str = Field(default="0.1.0")
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000)
    log_level: str = Field(default="INFO")
    # Start every fresh store with the example record
    seed: bool = Field(default=True)


@lru_cache(maxsize=1)
def get_settings() -> PeopleSettings:
    return PeopleSettings()
