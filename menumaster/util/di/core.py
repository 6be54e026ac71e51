"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from menumaster.config import (
    AuthSettings,
    InvitationSettings,
    PaymentSettings,
    Settings,
)
from menumaster.util.di.base import ProviderBase
from menumaster.util.error import ConfigurationError

PLACEHOLDER_SECRET = "CHANGE_ME_IN_PRODUCTION"


def check_production_secrets(settings: Settings) -> None:
    """Refuse to start production with placeholder secrets.

    Raises:
        ConfigurationError: If a required secret still has its default value
    """
    if settings.environment != "production":
        return

    missing = [
        name
        for name, value in (
            ("AUTH__JWT_SECRET", settings.auth.jwt_secret),
            ("PAYMENT__STRIPE_SECRET_KEY", settings.payment.stripe_secret_key),
        )
        if value == PLACEHOLDER_SECRET
    ]
    if missing:
        raise ConfigurationError(f"Missing production secrets: {', '.join(missing)}")


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        settings = Settings()
        check_production_secrets(settings)
        return settings

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_payment_settings(self, settings: Settings) -> PaymentSettings:
        """Provide payment settings."""
        return settings.payment

    @provide(scope=Scope.APP)
    def provide_invitation_settings(self, settings: Settings) -> InvitationSettings:
        """Provide invitation settings."""
        return settings.invitations
