from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from ..models.domain import Currency


class Settings(BaseSettings):
    """Ledger settings, read from ``LEDGER_*`` environment variables or ``.env``."""

    app_name: str = "Account Ledger API"
    database_url: str = "sqlite:///account_ledger.db"
    log_level: str = "INFO"
    # currency given to accounts opened without one
    default_currency: Currency = Currency.USD

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="LEDGER_",
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
