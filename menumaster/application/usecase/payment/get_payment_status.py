"""Get payment status use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from menumaster.application.usecase.base import BaseUseCase
from menumaster.domain.service import UserService
from menumaster.domain.value import UserId


class GetPaymentStatusRequest(BaseModel):
    """Get payment status request."""

    user_id: str  # User ID from auth


class GetPaymentStatusResponse(BaseModel):
    """Get payment status response."""

    has_paid: bool
    is_admin: bool
    payment_date: datetime | None = None


class GetPaymentStatusUseCase(BaseUseCase):
    """Use case for reading the principal's payment flags."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize get payment status use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: GetPaymentStatusRequest) -> GetPaymentStatusResponse:
        """Execute get payment status flow.

        Raises:
            NotFoundError: If user not found
        """
        user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        return GetPaymentStatusResponse(
            has_paid=user.has_paid,
            is_admin=user.is_admin,
            payment_date=user.payment_date,
        )
