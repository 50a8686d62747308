"""Application settings and configuration."""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SeedAccount(BaseModel):
    """Account loaded into the ledger at startup."""

    account_number: int
    pin: int
    available_balance: Decimal
    total_balance: Decimal

    @model_validator(mode="after")
    def _check_balances(self) -> "SeedAccount":
        if self.total_balance < self.available_balance:
            raise ValueError("total_balance must be >= available_balance")
        return self


def default_seed_accounts() -> list[SeedAccount]:
    """Return the two sample accounts the terminal ships with."""
    return [
        SeedAccount(
            account_number=12345,
            pin=54321,
            available_balance=Decimal("1000.00"),
            total_balance=Decimal("1200.00"),
        ),
        SeedAccount(
            account_number=98765,
            pin=56789,
            available_balance=Decimal("200.00"),
            total_balance=Decimal("200.00"),
        ),
    ]


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="ATM_",
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "ATM Terminal"
    app_version: str = "0.1.0"

    log_level: str = "INFO"

    # Cash dispenser
    bill_denomination: int = 20
    initial_bill_count: int = 500
    withdrawal_amounts: list[int] = [20, 40, 60, 100, 200]

    # Ledger seed data (JSON list when set through the environment)
    seed_accounts: list[SeedAccount] = Field(default_factory=default_seed_accounts)


# Global settings instance (can be replaced at runtime)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the current settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def set_settings(settings: Settings) -> None:
    """Set the global settings instance (used by tests and embedders)."""
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Reset settings to force reload."""
    global _settings
    _settings = None
