from __future__ import annotations

from decimal import Decimal
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .storage.ledger_store import DEFAULT_LEDGER_KEY


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    data_dir: Path = Field(default=Path(".cache") / "vault", alias="VAULT_DATA_DIR")
    ledger_key: str = Field(default=DEFAULT_LEDGER_KEY, alias="VAULT_LEDGER_KEY")

    # major units (rupees)
    monthly_budget: Decimal = Field(default=Decimal("50000"), alias="VAULT_MONTHLY_BUDGET")

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    def validate_required(self) -> None:
        if not self.ledger_key.strip():
            raise ValueError("VAULT_LEDGER_KEY must not be empty")

        if self.monthly_budget < 0:
            raise ValueError("VAULT_MONTHLY_BUDGET must be >= 0")


@lru_cache
def load_settings() -> Settings:
    settings = Settings()
    settings.validate_required()
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    return settings
