"""Tests for engine settings."""

from decimal import Decimal

import pytest

from receipt_split.config import Settings, load_settings
from receipt_split.exceptions import ConfigurationError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate settings from the developer's environment and .env file."""
    for name in (
        "RECEIPT_SPLIT_VARIANCE_WARNING_PERCENT",
        "RECEIPT_SPLIT_VARIANCE_ERROR_PERCENT",
        "RECEIPT_SPLIT_MINIMUM_SETTLEMENT_AMOUNT",
        "RECEIPT_SPLIT_CURRENCY_SYMBOL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


class TestSettings:
    """Test settings defaults and overrides."""

    def test_defaults(self):
        settings = load_settings()

        assert settings.variance_warning_percent == Decimal("1.0")
        assert settings.variance_error_percent == Decimal("10.0")
        assert settings.minimum_settlement_amount == Decimal("0.01")
        assert settings.currency_symbol == "$"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("RECEIPT_SPLIT_VARIANCE_ERROR_PERCENT", "15")
        monkeypatch.setenv("receipt_split_currency_symbol", "€")

        settings = load_settings()

        assert settings.variance_error_percent == Decimal("15")
        assert settings.currency_symbol == "€"

    def test_dotenv_file(self, tmp_path):
        (tmp_path / ".env").write_text("RECEIPT_SPLIT_MINIMUM_SETTLEMENT_AMOUNT=0.50\n")

        settings = load_settings()

        assert settings.minimum_settlement_amount == Decimal("0.50")

    def test_keyword_overrides(self):
        settings = load_settings(variance_warning_percent=Decimal("2"))

        assert settings.variance_warning_percent == Decimal("2")

    def test_warning_above_error_rejected(self, monkeypatch):
        monkeypatch.setenv("RECEIPT_SPLIT_VARIANCE_WARNING_PERCENT", "20")

        with pytest.raises(ConfigurationError, match="variance_warning_percent"):
            load_settings()

    def test_negative_threshold_rejected(self):
        with pytest.raises(ConfigurationError):
            load_settings(minimum_settlement_amount=Decimal("-1"))

    def test_settings_class_validates_directly(self):
        with pytest.raises(ValueError):
            Settings(variance_warning_percent=Decimal("50"))
