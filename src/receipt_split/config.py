"""Configuration management for ReceiptSplit."""

from decimal import Decimal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError


class Settings(BaseSettings):
    """Engine settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="RECEIPT_SPLIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Variance thresholds (percent of the entered total)
    variance_warning_percent: Decimal = Field(default=Decimal("1.0"), ge=0)
    variance_error_percent: Decimal = Field(default=Decimal("10.0"), ge=0)

    # Settlements must be strictly greater than this amount
    minimum_settlement_amount: Decimal = Field(default=Decimal("0.01"), ge=0)

    # Display only
    currency_symbol: str = "$"

    @model_validator(mode="after")
    def _check_thresholds(self) -> "Settings":
        if self.variance_warning_percent > self.variance_error_percent:
            raise ValueError(
                "variance_warning_percent must not exceed variance_error_percent"
            )
        return self


def load_settings(**overrides) -> Settings:
    """Load engine settings from the environment (and an optional .env file)."""
    try:
        return Settings(**overrides)
    except Exception as e:
        raise ConfigurationError(
            f"Failed to load settings. Check your RECEIPT_SPLIT_* environment "
            f"variables or .env file.\n"
            f"Error: {e}"
        ) from e
