"""Tests for payment use cases."""

import pytest

from menumaster.application.usecase.payment import (
    ConfirmPaymentRequest,
    ConfirmPaymentUseCase,
    CreatePaymentIntentRequest,
    CreatePaymentIntentUseCase,
    GetPaymentStatsRequest,
    GetPaymentStatsUseCase,
    GetPaymentStatusRequest,
    GetPaymentStatusUseCase,
)
from menumaster.domain.error import NotAuthorizedError
from menumaster.domain.service import UserService
from menumaster.domain.value import PaymentConfirmationOutcome
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestGetPaymentStatusUseCase:
    """Tests for GetPaymentStatusUseCase."""

    @pytest.mark.asyncio
    async def test_reports_flags(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GetPaymentStatusUseCase)
        user_service = await unit_env.get(UserService)
        user = await user_service.save(make_user(has_paid=True))

        # Act
        response = await use_case.execute(GetPaymentStatusRequest(user_id=str(user.id)))

        # Assert
        assert response.has_paid is True
        assert response.is_admin is False
        assert response.payment_date == user.payment_date


class TestConfirmPaymentUseCase:
    """Tests for ConfirmPaymentUseCase."""

    @pytest.mark.asyncio
    async def test_confirm_then_status_shows_paid(self, unit_env):
        # Arrange
        confirm = await unit_env.get(ConfirmPaymentUseCase)
        status = await unit_env.get(GetPaymentStatusUseCase)
        user_service = await unit_env.get(UserService)
        user = await user_service.save(make_user())

        # Act
        response = await confirm.execute(
            ConfirmPaymentRequest(user_id=str(user.id), confirmation_id="pi_ok")
        )

        # Assert
        assert response.outcome == PaymentConfirmationOutcome.OK
        after = await status.execute(GetPaymentStatusRequest(user_id=str(user.id)))
        assert after.has_paid is True
        assert after.payment_date == response.payment_date

    @pytest.mark.asyncio
    async def test_rejected_confirmation_leaves_status(self, unit_env):
        confirm = await unit_env.get(ConfirmPaymentUseCase)
        user_service = await unit_env.get(UserService)
        user = await user_service.save(make_user())

        response = await confirm.execute(
            ConfirmPaymentRequest(user_id=str(user.id), confirmation_id="pi_fail")
        )

        assert response.outcome == PaymentConfirmationOutcome.PROVIDER_VERIFICATION_FAILED
        assert (await user_service.get_by_id(user.id)).has_paid is False


class TestCreatePaymentIntentUseCase:
    """Tests for CreatePaymentIntentUseCase."""

    @pytest.mark.asyncio
    async def test_returns_client_secret(self, unit_env):
        use_case = await unit_env.get(CreatePaymentIntentUseCase)
        user_service = await unit_env.get(UserService)
        user = await user_service.save(make_user())

        response = await use_case.execute(
            CreatePaymentIntentRequest(user_id=str(user.id))
        )

        assert response.client_secret.startswith(response.intent_id)
        assert response.amount == 34900
        assert response.currency == "eur"


class TestGetPaymentStatsUseCase:
    """Tests for GetPaymentStatsUseCase."""

    @pytest.mark.asyncio
    async def test_admin_sees_counts(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GetPaymentStatsUseCase)
        user_service = await unit_env.get(UserService)
        admin = await user_service.save(make_user(is_admin=True))
        await user_service.save(make_user(has_paid=True))

        # Act
        response = await use_case.execute(GetPaymentStatsRequest(user_id=str(admin.id)))

        # Assert
        assert response.total_users == 2
        assert response.paid_users == 1
        assert response.active_users == 1

    @pytest.mark.asyncio
    async def test_non_admin_is_refused(self, unit_env):
        use_case = await unit_env.get(GetPaymentStatsUseCase)
        user_service = await unit_env.get(UserService)
        user = await user_service.save(make_user(has_paid=True))

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(GetPaymentStatsRequest(user_id=str(user.id)))
