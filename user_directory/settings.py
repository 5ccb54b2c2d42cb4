from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Values come from the process environment; a .env file in the working directory fills gaps.
    model_config = SettingsConfigDict(env_prefix="", extra="ignore", env_file=".env", env_file_encoding="utf-8")

    # Env vars:
    # - USERS_FILE: newline-delimited user list, relative to the working directory by default
    # - HOST / PORT: listening address for `user-directory`
    # - LOG_LEVEL (optional)
    users_file: str = Field(default="./users.txt", validation_alias="USERS_FILE")

    host: str = Field(default="0.0.0.0", validation_alias="HOST")
    port: int = Field(default=8888, validation_alias="PORT")

    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")


def get_settings() -> Settings:
    """Build Settings from the current environment.

    Called per request through deps.get_settings_dep, so env changes made by
    tests take effect immediately.
    """
    return Settings()
