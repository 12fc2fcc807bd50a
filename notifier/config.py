"""Library configuration settings."""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"
ENV_PREFIX = "NOTIFIER_"


class Settings(BaseSettings):
    """Configuration values loaded from ``NOTIFIER_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding=ENV_FILE_ENCODING,
        env_prefix=ENV_PREFIX,
        extra="ignore",
    )

    app_timezone: str | None = Field(
        default="UTC",
        description="IANA timezone name or UTC offset used to stamp and present timestamps",
    )
    rich_object_types: Annotated[list[str], NoDecode] = Field(
        default_factory=list,
        description="Additional rich object types accepted with only 'id' and 'name' required",
    )

    @field_validator("rich_object_types", mode="before")
    @classmethod
    def _split_type_names(cls, value: object) -> object:
        if isinstance(value, str):
            return [name.strip() for name in value.split(",") if name.strip()]
        return value


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
