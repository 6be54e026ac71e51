"""Unit tests for Settings."""

import pytest

from menumaster.config import Settings
from menumaster.util.di.core import check_production_secrets
from menumaster.util.error import ConfigurationError


class TestSettings:
    """Tests for computed URLs and nested env overrides."""

    def test_development_urls(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "development")
        monkeypatch.setenv("HOST", "localhost")
        monkeypatch.setenv("FRONTEND_HOST", "localhost")

        settings = Settings()

        assert settings.api.base_url == "http://localhost:8000"
        assert settings.api.frontend_url == "http://localhost:5173"
        assert settings.api.payment_url == "http://localhost:5173/payment"

    def test_production_urls_use_https(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("HOST", "api.menuisland.it")
        monkeypatch.setenv("FRONTEND_HOST", "menuisland.it")

        settings = Settings()

        assert settings.api.base_url == "https://api.menuisland.it"
        assert settings.api.payment_url == "https://menuisland.it/payment"

    def test_nested_payment_override(self, monkeypatch):
        monkeypatch.setenv("PAYMENT__AMOUNT_CENTS", "19900")
        monkeypatch.setenv("PAYMENT__VERIFICATION_TIMEOUT_SECONDS", "2.5")

        settings = Settings()

        assert settings.payment.amount_cents == 19900
        assert settings.payment.verification_timeout_seconds == 2.5
        assert settings.payment.currency == "eur"


class TestCheckProductionSecrets:
    """Tests for check_production_secrets."""

    def test_placeholder_secrets_rejected_in_production(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("AUTH__JWT_SECRET", "real-secret")

        with pytest.raises(ConfigurationError, match="PAYMENT__STRIPE_SECRET_KEY"):
            check_production_secrets(Settings())

    def test_placeholders_allowed_outside_production(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "development")

        check_production_secrets(Settings())
