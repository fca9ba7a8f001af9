"""Runtime settings, read from ``TRANSFER_*`` environment variables or ``.env``."""

from __future__ import annotations

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "Transfer Demo API"
    database_url: str = "sqlite:///transfer_demo.db"
    # Log every SQL statement the engine emits.
    sql_echo: bool = False
    log_level: str = "INFO"
    # Insert acc1/acc2 on startup when the account table is empty.
    seed_demo_accounts: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="TRANSFER_",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        return value.upper()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
