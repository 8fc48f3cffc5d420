from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Centralized configuration loaded from environment variables and .env."""

    empty_format: str = Field(
        default="零元整",
        description="Result of currency_to_cn for empty input when the caller passes no override",
        alias="CNNUMERAL_EMPTY_FORMAT",
    )
    log_level: str = Field(
        default="WARNING",
        description="Level of the stderr log sink installed by the CLI",
        alias="CNNUMERAL_LOG_LEVEL",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        env_prefix="",
        case_sensitive=False,
        populate_by_name=True,
    )
