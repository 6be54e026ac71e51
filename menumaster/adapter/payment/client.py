"""Stripe payment provider implementation.

Uses the one-time PaymentIntent flow: the client pays with the intent's
client secret, then posts the intent id back for confirmation.
"""

import asyncio
import secrets

import logfire
import stripe

from menumaster.domain.error import PaymentProviderError
from menumaster.domain.service.payment_service import PaymentIntent, PaymentProvider
from menumaster.domain.value import PaymentConfirmationId, PaymentVerification


class StripePaymentError(PaymentProviderError):
    """Stripe API error."""

    pass


class StripePaymentProvider(PaymentProvider):
    """Base class for Stripe payment providers.

    Provides type distinction for dependency injection.
    """

    pass


class RealStripePaymentProvider(StripePaymentProvider):
    """Stripe PaymentIntent client.

    The Stripe SDK is synchronous; calls run in a worker thread so the event
    loop stays free and the caller's timeout can abandon them.
    """

    def __init__(self, secret_key: str) -> None:
        """Initialize Stripe client.

        Args:
            secret_key: Stripe secret API key
        """
        self.secret_key = secret_key

    async def create_payment_intent(
        self, user_id: str, amount_cents: int, currency: str
    ) -> PaymentIntent:
        """Create a PaymentIntent carrying the user id in its metadata.

        Args:
            user_id: Paying user
            amount_cents: Amount in minor units
            currency: ISO currency code

        Returns:
            Intent id and client secret

        Raises:
            StripePaymentError: If Stripe rejects the request
        """
        try:
            intent = await asyncio.to_thread(
                stripe.PaymentIntent.create,
                amount=amount_cents,
                currency=currency,
                metadata={"user_id": user_id},
                automatic_payment_methods={"enabled": True},
                api_key=self.secret_key,
            )
        except stripe.StripeError as e:
            logfire.error("Stripe intent creation failed", user_id=user_id, error=str(e))
            raise StripePaymentError("Failed to create Stripe payment intent") from e

        intent_id = getattr(intent, "id", None)
        client_secret = getattr(intent, "client_secret", None)
        if not intent_id or not client_secret:
            raise StripePaymentError("Stripe payment intent response is incomplete")

        return PaymentIntent(
            intent_id=str(intent_id),
            client_secret=str(client_secret),
            amount_cents=amount_cents,
            currency=currency,
        )

    async def verify_payment(
        self, confirmation_id: PaymentConfirmationId
    ) -> PaymentVerification:
        """Retrieve the PaymentIntent and report whether it succeeded.

        Args:
            confirmation_id: PaymentIntent id

        Returns:
            Provider verdict

        Raises:
            StripePaymentError: If Stripe cannot be queried
        """
        try:
            intent = await asyncio.to_thread(
                stripe.PaymentIntent.retrieve,
                confirmation_id.root,
                api_key=self.secret_key,
            )
        except stripe.StripeError as e:
            raise StripePaymentError(
                f"Failed to retrieve payment intent {confirmation_id.root}"
            ) from e

        status = getattr(intent, "status", None)
        metadata = getattr(intent, "metadata", None)
        user_id = metadata.get("user_id") if metadata else None

        logfire.info(
            "Stripe payment intent retrieved",
            intent_id=confirmation_id.root,
            status=status,
        )

        return PaymentVerification(
            succeeded=status == "succeeded",
            user_id=user_id,
            status=status,
        )


class MockStripePaymentProvider(StripePaymentProvider):
    """Mock Stripe provider for testing.

    Returns deterministic verdicts without calling Stripe:
    - ids containing "timeout" never answer
    - ids containing "error" raise StripePaymentError
    - ids containing "fail" report requires_payment_method
    - anything else succeeds

    Intents created through the mock remember their user id.
    """

    def __init__(self, latency_seconds: float = 0.0) -> None:
        """Initialize mock provider.

        Args:
            latency_seconds: Simulated round-trip time for each call
        """
        self.latency_seconds = latency_seconds
        self._intent_owners: dict[str, str] = {}
        self.verify_calls: list[str] = []

    async def create_payment_intent(
        self, user_id: str, amount_cents: int, currency: str
    ) -> PaymentIntent:
        """Return a fake intent."""
        await asyncio.sleep(self.latency_seconds)
        intent_id = f"pi_mock_{secrets.token_hex(8)}"
        self._intent_owners[intent_id] = user_id
        return PaymentIntent(
            intent_id=intent_id,
            client_secret=f"{intent_id}_secret_mock",
            amount_cents=amount_cents,
            currency=currency,
        )

    async def verify_payment(
        self, confirmation_id: PaymentConfirmationId
    ) -> PaymentVerification:
        """Return a verdict derived from the id."""
        intent_id = confirmation_id.root
        self.verify_calls.append(intent_id)
        await asyncio.sleep(self.latency_seconds)

        if "timeout" in intent_id:
            await asyncio.Event().wait()
        if "error" in intent_id:
            raise StripePaymentError(f"Mock provider error for {intent_id}")
        if "fail" in intent_id:
            return PaymentVerification(
                succeeded=False, status="requires_payment_method"
            )

        return PaymentVerification(
            succeeded=True,
            user_id=self._intent_owners.get(intent_id),
            status="succeeded",
        )
