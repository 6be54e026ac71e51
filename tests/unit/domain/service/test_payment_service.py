"""Unit tests for PaymentService."""

import asyncio
from uuid import uuid4

import pytest

from menumaster.adapter.payment import MockStripePaymentProvider
from menumaster.config import PaymentSettings
from menumaster.domain.error import NotFoundError, PaymentNotRequiredError
from menumaster.domain.repository import UserRepository
from menumaster.domain.service import PaymentService
from menumaster.domain.value import (
    PaymentConfirmationId,
    PaymentConfirmationOutcome,
    UserId,
)
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


def _confirmation(value: str = "pi_test_123") -> PaymentConfirmationId:
    return PaymentConfirmationId(root=value)


async def _service(
    unit_env,
    provider: MockStripePaymentProvider | None = None,
    timeout_seconds: float = 1.0,
) -> tuple[PaymentService, UserRepository, MockStripePaymentProvider]:
    user_repo = await unit_env.get(UserRepository)
    provider = provider or MockStripePaymentProvider()
    service = PaymentService(
        user_repository=user_repo,
        payment_provider=provider,
        payment_settings=PaymentSettings(verification_timeout_seconds=timeout_seconds),
    )
    return service, user_repo, provider


class TestConfirmPayment:
    """Tests for confirm_payment method."""

    @pytest.mark.asyncio
    async def test_verified_payment_marks_user_paid(self, unit_env):
        # Arrange
        service, user_repo, _ = await _service(unit_env)
        user = await user_repo.save(make_user())

        # Act
        result = await service.confirm_payment(user.id, _confirmation())

        # Assert
        assert result.outcome == PaymentConfirmationOutcome.OK
        assert result.payment_date is not None

        stored = await user_repo.find_by_id(user.id)
        assert stored.has_paid is True
        assert stored.payment_date == result.payment_date

    @pytest.mark.asyncio
    async def test_repeat_confirmation_is_idempotent(self, unit_env):
        """A second call reports the first payment and changes nothing."""
        # Arrange
        service, user_repo, provider = await _service(unit_env)
        user = await user_repo.save(make_user())
        first = await service.confirm_payment(user.id, _confirmation())

        # Act
        second = await service.confirm_payment(user.id, _confirmation())

        # Assert
        assert second.outcome == PaymentConfirmationOutcome.ALREADY_CONFIRMED
        assert second.payment_date == first.payment_date
        # Already-paid users never reach the provider
        assert len(provider.verify_calls) == 1

    @pytest.mark.asyncio
    async def test_admin_gets_not_required_without_mutation(self, unit_env):
        # Arrange
        service, user_repo, provider = await _service(unit_env)
        admin = await user_repo.save(make_user(is_admin=True))

        # Act
        result = await service.confirm_payment(admin.id, _confirmation())

        # Assert
        assert result.outcome == PaymentConfirmationOutcome.NOT_REQUIRED
        stored = await user_repo.find_by_id(admin.id)
        assert stored.has_paid is False
        assert stored.payment_date is None
        assert provider.verify_calls == []

    @pytest.mark.asyncio
    async def test_unsucceeded_intent_fails_without_mutation(self, unit_env):
        # Arrange
        service, user_repo, _ = await _service(unit_env)
        user = await user_repo.save(make_user())

        # Act
        result = await service.confirm_payment(user.id, _confirmation("pi_fail_1"))

        # Assert
        assert result.outcome == PaymentConfirmationOutcome.PROVIDER_VERIFICATION_FAILED
        assert result.payment_date is None
        stored = await user_repo.find_by_id(user.id)
        assert stored.has_paid is False

    @pytest.mark.asyncio
    async def test_provider_error_fails_without_mutation(self, unit_env):
        service, user_repo, _ = await _service(unit_env)
        user = await user_repo.save(make_user())

        result = await service.confirm_payment(user.id, _confirmation("pi_error_1"))

        assert result.outcome == PaymentConfirmationOutcome.PROVIDER_VERIFICATION_FAILED
        assert (await user_repo.find_by_id(user.id)).has_paid is False

    @pytest.mark.asyncio
    async def test_provider_timeout_fails_without_mutation(self, unit_env):
        """A provider that never answers is cut off by the configured bound."""
        # Arrange
        service, user_repo, _ = await _service(unit_env, timeout_seconds=0.05)
        user = await user_repo.save(make_user())

        # Act
        result = await asyncio.wait_for(
            service.confirm_payment(user.id, _confirmation("pi_timeout_1")),
            timeout=5,
        )

        # Assert
        assert result.outcome == PaymentConfirmationOutcome.PROVIDER_VERIFICATION_FAILED
        assert (await user_repo.find_by_id(user.id)).has_paid is False

    @pytest.mark.asyncio
    async def test_intent_of_another_user_is_rejected(self, unit_env):
        # Arrange
        service, user_repo, provider = await _service(unit_env)
        payer = await user_repo.save(make_user())
        other = await user_repo.save(make_user())
        intent = await provider.create_payment_intent(str(payer.id), 34900, "eur")

        # Act
        result = await service.confirm_payment(
            other.id, _confirmation(intent.intent_id)
        )

        # Assert
        assert result.outcome == PaymentConfirmationOutcome.PROVIDER_VERIFICATION_FAILED
        assert (await user_repo.find_by_id(other.id)).has_paid is False

    @pytest.mark.asyncio
    async def test_unknown_user_raises_not_found(self, unit_env):
        service, _, _ = await _service(unit_env)

        with pytest.raises(NotFoundError):
            await service.confirm_payment(UserId(uuid4()), _confirmation())

    @pytest.mark.asyncio
    async def test_concurrent_confirmations_have_one_winner(self, unit_env):
        """Both calls pass verification; only one may flip has_paid."""
        # Arrange
        provider = MockStripePaymentProvider(latency_seconds=0.01)
        service, user_repo, _ = await _service(unit_env, provider=provider)
        user = await user_repo.save(make_user())

        # Act
        results = await asyncio.gather(
            service.confirm_payment(user.id, _confirmation("pi_a")),
            service.confirm_payment(user.id, _confirmation("pi_b")),
        )

        # Assert
        outcomes = sorted(r.outcome.value for r in results)
        assert outcomes == [
            PaymentConfirmationOutcome.ALREADY_CONFIRMED.value,
            PaymentConfirmationOutcome.OK.value,
        ]
        # Both verified before either wrote
        assert len(provider.verify_calls) == 2

        stored = await user_repo.find_by_id(user.id)
        winner = next(r for r in results if r.ok)
        loser = next(r for r in results if not r.ok)
        assert stored.payment_date == winner.payment_date
        assert loser.payment_date == winner.payment_date


class TestCreatePaymentIntent:
    """Tests for create_payment_intent method."""

    @pytest.mark.asyncio
    async def test_creates_intent_for_configured_amount(self, unit_env):
        # Arrange
        service, user_repo, _ = await _service(unit_env)
        user = await user_repo.save(make_user())

        # Act
        intent = await service.create_payment_intent(user.id)

        # Assert
        assert intent.amount_cents == 34900
        assert intent.currency == "eur"
        assert intent.client_secret

    @pytest.mark.asyncio
    async def test_intent_then_confirmation_round_trip(self, unit_env):
        service, user_repo, _ = await _service(unit_env)
        user = await user_repo.save(make_user())

        intent = await service.create_payment_intent(user.id)
        result = await service.confirm_payment(user.id, _confirmation(intent.intent_id))

        assert result.outcome == PaymentConfirmationOutcome.OK

    @pytest.mark.asyncio
    @pytest.mark.parametrize("is_admin, has_paid", [(True, False), (False, True)])
    async def test_not_required_for_admins_and_paid_users(
        self, unit_env, is_admin, has_paid
    ):
        service, user_repo, _ = await _service(unit_env)
        user = await user_repo.save(make_user(is_admin=is_admin, has_paid=has_paid))

        with pytest.raises(PaymentNotRequiredError):
            await service.create_payment_intent(user.id)


class TestGetPaymentStats:
    """Tests for get_payment_stats method."""

    @pytest.mark.asyncio
    async def test_counts_total_and_paid(self, unit_env):
        # Arrange
        service, user_repo, _ = await _service(unit_env)
        await user_repo.save(make_user())
        await user_repo.save(make_user(has_paid=True))
        await user_repo.save(make_user(has_paid=True))

        # Act
        stats = await service.get_payment_stats()

        # Assert
        assert stats.total_users == 3
        assert stats.paid_users == 2
        assert stats.active_users == 2
