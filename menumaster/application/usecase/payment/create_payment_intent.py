"""Create payment intent use case."""

from uuid import UUID

from pydantic import BaseModel

from menumaster.application.usecase.base import BaseUseCase
from menumaster.domain.service import PaymentService
from menumaster.domain.value import UserId


class CreatePaymentIntentRequest(BaseModel):
    """Create payment intent request."""

    user_id: str  # User ID from auth


class CreatePaymentIntentResponse(BaseModel):
    """Create payment intent response."""

    intent_id: str
    client_secret: str
    amount: int  # Minor units
    currency: str


class CreatePaymentIntentUseCase(BaseUseCase):
    """Use case for starting the activation payment at the provider."""

    def __init__(self, payment_service: PaymentService) -> None:
        self.payment_service = payment_service

    async def execute(
        self, request: CreatePaymentIntentRequest
    ) -> CreatePaymentIntentResponse:
        """Execute create payment intent flow.

        Raises:
            NotFoundError: If user not found
            PaymentNotRequiredError: If the user is an admin or already paid
            PaymentProviderError: If the provider call fails
        """
        intent = await self.payment_service.create_payment_intent(
            UserId(UUID(request.user_id))
        )
        return CreatePaymentIntentResponse(
            intent_id=intent.intent_id,
            client_secret=intent.client_secret,
            amount=intent.amount_cents,
            currency=intent.currency,
        )
