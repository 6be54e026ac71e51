"""Confirm payment use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from menumaster.application.usecase.base import BaseUseCase
from menumaster.domain.service import PaymentService
from menumaster.domain.value import (
    PaymentConfirmationId,
    PaymentConfirmationOutcome,
    UserId,
)


class ConfirmPaymentRequest(BaseModel):
    """Confirm payment request."""

    user_id: str  # User ID from auth
    confirmation_id: str = Field(min_length=1, max_length=255)


class ConfirmPaymentResponse(BaseModel):
    """Confirm payment response."""

    outcome: PaymentConfirmationOutcome
    payment_date: datetime | None = None


class ConfirmPaymentUseCase(BaseUseCase):
    """Use case for confirming the one-time activation payment."""

    def __init__(self, payment_service: PaymentService) -> None:
        """Initialize confirm payment use case.

        Args:
            payment_service: Payment domain service
        """
        self.payment_service = payment_service

    async def execute(self, request: ConfirmPaymentRequest) -> ConfirmPaymentResponse:
        """Execute confirm payment flow.

        Args:
            request: Principal and provider confirmation id

        Returns:
            Confirmation outcome with the recorded payment date, if any

        Raises:
            NotFoundError: If user not found
            StoreUnavailableError: If the store cannot be reached
        """
        result = await self.payment_service.confirm_payment(
            UserId(UUID(request.user_id)),
            PaymentConfirmationId(root=request.confirmation_id),
        )
        return ConfirmPaymentResponse(
            outcome=result.outcome, payment_date=result.payment_date
        )
