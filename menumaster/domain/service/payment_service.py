"""Payment domain service.

Drives the one-time activation payment: intent creation, confirmation and
the has_paid transition.
"""

import asyncio

import logfire

from menumaster.config import PaymentSettings
from menumaster.domain.error import (
    NotFoundError,
    PaymentNotRequiredError,
    PaymentProviderError,
)
from menumaster.domain.model.common import DomainModel, utcnow
from menumaster.domain.repository import UserRepository
from menumaster.domain.value import (
    PaymentConfirmationId,
    PaymentConfirmationOutcome,
    PaymentConfirmationResult,
    PaymentVerification,
    UserId,
)

from .base import Service


class PaymentIntent(DomainModel):
    """Client-side handle of a freshly created provider intent."""

    intent_id: str
    client_secret: str
    amount_cents: int
    currency: str


class PaymentStats(DomainModel):
    """Aggregate payment counters for administrators."""

    total_users: int
    paid_users: int
    # Access is bought once, so this always equals paid_users
    active_users: int


class PaymentProvider:
    """Generic payment provider interface."""

    async def create_payment_intent(
        self, user_id: str, amount_cents: int, currency: str
    ) -> PaymentIntent:
        """Create a one-time payment intent tagged with ``user_id``.

        Raises:
            PaymentProviderError: If the provider call fails
        """
        raise NotImplementedError

    async def verify_payment(
        self, confirmation_id: PaymentConfirmationId
    ) -> PaymentVerification:
        """Ask the provider for the verdict on a confirmation id.

        Raises:
            PaymentProviderError: If the provider call fails
        """
        raise NotImplementedError


class PaymentService(Service):
    """Domain service for the one-time activation payment."""

    def __init__(
        self,
        user_repository: UserRepository,
        payment_provider: PaymentProvider,
        payment_settings: PaymentSettings,
    ) -> None:
        """Initialize payment service.

        Args:
            user_repository: User repository
            payment_provider: External payment provider
            payment_settings: Payment settings
        """
        self.user_repository = user_repository
        self.payment_provider = payment_provider
        self.payment_settings = payment_settings

    async def confirm_payment(
        self, user_id: UserId, confirmation_id: PaymentConfirmationId
    ) -> PaymentConfirmationResult:
        """Confirm a provider payment and record it on the user.

        The local write happens strictly after a successful verification, and
        is a compare-and-set on has_paid, so concurrent confirmations for the
        same user yield exactly one OK.

        Args:
            user_id: Principal confirming the payment
            confirmation_id: Provider-issued confirmation id

        Returns:
            Typed confirmation outcome

        Raises:
            NotFoundError: If the user record does not exist
            StoreUnavailableError: If the store cannot be reached
        """
        with logfire.span(
            "payment_service.confirm_payment",
            user_id=str(user_id),
            confirmation_id=confirmation_id.root,
        ):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                raise NotFoundError("User", str(user_id))

            if user.is_admin:
                logfire.info("Payment not required for admin", user_id=str(user_id))
                return PaymentConfirmationResult(
                    outcome=PaymentConfirmationOutcome.NOT_REQUIRED
                )

            if user.has_paid:
                logfire.info("Payment already confirmed", user_id=str(user_id))
                return PaymentConfirmationResult(
                    outcome=PaymentConfirmationOutcome.ALREADY_CONFIRMED,
                    payment_date=user.payment_date,
                )

            if not await self._verify(user_id, confirmation_id):
                return PaymentConfirmationResult(
                    outcome=PaymentConfirmationOutcome.PROVIDER_VERIFICATION_FAILED
                )

            paid_at = utcnow()
            if await self.user_repository.mark_paid(user_id, paid_at):
                logfire.info(
                    "Payment confirmed",
                    user_id=str(user_id),
                    payment_date=paid_at.isoformat(),
                )
                return PaymentConfirmationResult(
                    outcome=PaymentConfirmationOutcome.OK, payment_date=paid_at
                )

            # Another confirmation won the compare-and-set
            current = await self.user_repository.find_by_id(user_id)
            logfire.info("Concurrent payment confirmation lost", user_id=str(user_id))
            return PaymentConfirmationResult(
                outcome=PaymentConfirmationOutcome.ALREADY_CONFIRMED,
                payment_date=current.payment_date if current else None,
            )

    async def create_payment_intent(self, user_id: UserId) -> PaymentIntent:
        """Create the provider intent for the one-time activation fee.

        Args:
            user_id: Principal about to pay

        Returns:
            Intent handle for the client-side payment form

        Raises:
            NotFoundError: If the user record does not exist
            PaymentNotRequiredError: If the user is an admin or already paid
            PaymentProviderError: If the provider call fails
        """
        with logfire.span(
            "payment_service.create_payment_intent", user_id=str(user_id)
        ):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                raise NotFoundError("User", str(user_id))
            if user.is_admin or user.has_paid:
                raise PaymentNotRequiredError(str(user_id))

            intent = await self.payment_provider.create_payment_intent(
                str(user_id),
                self.payment_settings.amount_cents,
                self.payment_settings.currency,
            )
            logfire.info(
                "Payment intent created",
                user_id=str(user_id),
                intent_id=intent.intent_id,
                amount_cents=intent.amount_cents,
            )
            return intent

    async def get_payment_stats(self) -> PaymentStats:
        """Count all users, paid users and active users.

        Returns:
            Payment stats
        """
        with logfire.span("payment_service.get_payment_stats"):
            total = await self.user_repository.count()
            paid = await self.user_repository.count(has_paid=True)
            return PaymentStats(
                total_users=total, paid_users=paid, active_users=paid
            )

    async def _verify(
        self, user_id: UserId, confirmation_id: PaymentConfirmationId
    ) -> bool:
        """Run the bounded provider verification.

        Returns:
            True only for a succeeded intent issued for this user
        """
        timeout = self.payment_settings.verification_timeout_seconds
        try:
            verification = await asyncio.wait_for(
                self.payment_provider.verify_payment(confirmation_id),
                timeout=timeout,
            )
        except asyncio.TimeoutError:
            logfire.warn(
                "Payment verification timed out",
                user_id=str(user_id),
                confirmation_id=confirmation_id.root,
                timeout_seconds=timeout,
            )
            return False
        except PaymentProviderError as e:
            logfire.warn(
                "Payment verification failed",
                user_id=str(user_id),
                confirmation_id=confirmation_id.root,
                error=str(e),
            )
            return False

        if not verification.succeeded:
            logfire.warn(
                "Payment not succeeded at provider",
                user_id=str(user_id),
                confirmation_id=confirmation_id.root,
                status=verification.status,
            )
            return False

        if verification.user_id is not None and verification.user_id != str(user_id):
            logfire.warn(
                "Payment belongs to another user",
                user_id=str(user_id),
                confirmation_id=confirmation_id.root,
            )
            return False

        return True
