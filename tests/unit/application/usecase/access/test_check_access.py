"""Tests for check access use case."""

from uuid import uuid4

import pytest

from menumaster.application.usecase.access import (
    CheckAccessRequest,
    CheckAccessUseCase,
)
from menumaster.config import Settings
from menumaster.domain.error import NotFoundError
from menumaster.domain.service import AccessGate, PaymentService, UserService
from menumaster.domain.value import (
    AccessDenialReason,
    PaymentConfirmationId,
)
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCheckAccessUseCase:
    """Tests for CheckAccessUseCase."""

    @pytest.mark.asyncio
    async def test_unpaid_user_is_sent_to_payment(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CheckAccessUseCase)
        user_service = await unit_env.get(UserService)
        user = await user_service.save(make_user())

        # Act
        response = await use_case.execute(CheckAccessRequest(user_id=str(user.id)))

        # Assert
        assert response.allowed is False
        assert response.reason == AccessDenialReason.PAYMENT_REQUIRED
        assert response.payment_url == Settings().api.payment_url

    @pytest.mark.asyncio
    async def test_admin_is_allowed(self, unit_env):
        use_case = await unit_env.get(CheckAccessUseCase)
        user_service = await unit_env.get(UserService)
        admin = await user_service.save(make_user(is_admin=True))

        response = await use_case.execute(CheckAccessRequest(user_id=str(admin.id)))

        assert response.allowed is True
        assert response.reason is None
        assert response.payment_url is None

    @pytest.mark.asyncio
    async def test_confirmation_is_visible_to_next_check(self, unit_env):
        """No cached snapshot: a payment unlocks access immediately."""
        # Arrange
        use_case = await unit_env.get(CheckAccessUseCase)
        user_service = await unit_env.get(UserService)
        payment_service = await unit_env.get(PaymentService)
        user = await user_service.save(make_user())
        request = CheckAccessRequest(user_id=str(user.id))
        assert (await use_case.execute(request)).allowed is False

        # Act
        await payment_service.confirm_payment(
            user.id, PaymentConfirmationId(root="pi_paid")
        )
        response = await use_case.execute(request)

        # Assert
        assert response.allowed is True

    @pytest.mark.asyncio
    async def test_unknown_user_raises_not_found(self, unit_env):
        user_service = await unit_env.get(UserService)
        use_case = CheckAccessUseCase(user_service, AccessGate(), Settings())

        with pytest.raises(NotFoundError):
            await use_case.execute(CheckAccessRequest(user_id=str(uuid4())))
