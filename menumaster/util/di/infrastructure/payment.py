"""Payment provider infrastructure."""

from dishka import Scope, provide

from menumaster.adapter.payment import RealStripePaymentProvider, StripePaymentProvider
from menumaster.config import PaymentSettings
from menumaster.domain.service import PaymentProvider
from menumaster.util.di.base import ProviderBase


class StripeProvider(ProviderBase):
    """Payment component base (Stripe)."""

    __mock_component__ = "payment"


class ProdStripeProvider(StripeProvider):
    """Production Stripe provider."""

    __is_mock__ = False

    scope = Scope.APP

    @provide
    def get_stripe_provider(
        self, payment_settings: PaymentSettings
    ) -> StripePaymentProvider:
        """Provide the real Stripe client."""
        return RealStripePaymentProvider(secret_key=payment_settings.stripe_secret_key)

    @provide
    def get_payment_provider(
        self, stripe_provider: StripePaymentProvider
    ) -> PaymentProvider:
        """Expose the Stripe client through the domain interface."""
        return stripe_provider
