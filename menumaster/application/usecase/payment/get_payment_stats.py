"""Get payment stats use case."""

from uuid import UUID

from pydantic import BaseModel

from menumaster.application.usecase.base import BaseUseCase
from menumaster.domain.service import PaymentService, UserService
from menumaster.domain.value import UserId


class GetPaymentStatsRequest(BaseModel):
    """Get payment stats request."""

    user_id: str  # Admin user ID from auth


class GetPaymentStatsResponse(BaseModel):
    """Get payment stats response."""

    total_users: int
    paid_users: int
    active_users: int


class GetPaymentStatsUseCase(BaseUseCase):
    """Use case for the admin payment overview."""

    def __init__(
        self, payment_service: PaymentService, user_service: UserService
    ) -> None:
        """Initialize get payment stats use case.

        Args:
            payment_service: Payment domain service
            user_service: User domain service
        """
        self.payment_service = payment_service
        self.user_service = user_service

    async def execute(self, request: GetPaymentStatsRequest) -> GetPaymentStatsResponse:
        """Execute get payment stats flow.

        Raises:
            NotFoundError: If user not found
            NotAuthorizedError: If the user is not an admin
        """
        await self.user_service.require_admin(
            UserId(UUID(request.user_id)), "view payment stats"
        )
        stats = await self.payment_service.get_payment_stats()
        return GetPaymentStatsResponse(
            total_users=stats.total_users,
            paid_users=stats.paid_users,
            active_users=stats.active_users,
        )
