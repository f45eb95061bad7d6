"""Runtime configuration, read from ``OBJPATH_*`` environment variables."""

from __future__ import annotations

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class ObjectPathConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="OBJPATH_", extra="ignore")

    # Used when a payload arrives without a Content-Type, and when
    # re-serializing without an explicit content type.
    default_content_type: str = Field("application/json", min_length=1)
    pretty: bool = False
    log_level: LogLevel = "WARNING"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper()
        return value


OBJPATH_CONFIG = ObjectPathConfig()


__all__ = ["OBJPATH_CONFIG", "LogLevel", "ObjectPathConfig"]
