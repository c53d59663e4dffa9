from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # ENV-only configuration
    model_config = SettingsConfigDict(env_prefix="")

    database_url: str = "postgresql+asyncpg://localhost:5432/healthcheck"
    api_host: str = "0.0.0.0"
    api_port: int = Field(default=8000, ge=1, le=65535)
    log_level: str = "INFO"

    config_store_backend: Literal["database", "dynamodb"] = "database"
    settings_table: str = "health-check-settings"
    endpoints_key: str = "endpoints"
    probe_timeout_ms: int = Field(default=10_000, ge=1)

    notifier_backend: Literal["sns", "telegram"] = "sns"
    notifier_timeout_sec: float = Field(default=5.0, gt=0)
    aws_region: str | None = None
    sns_topic_arn: str | None = None
    telegram_bot_token: str | None = None
    telegram_chat_id: str | None = None
    telegram_parse_mode: str | None = None


settings = Settings()
