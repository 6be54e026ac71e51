"""Payment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field, field_validator

from menumaster.application.usecase.payment import (
    ConfirmPaymentRequest,
    ConfirmPaymentResponse,
    ConfirmPaymentUseCase,
    CreatePaymentIntentRequest,
    CreatePaymentIntentResponse,
    CreatePaymentIntentUseCase,
    GetPaymentStatsRequest,
    GetPaymentStatsResponse,
    GetPaymentStatsUseCase,
    GetPaymentStatusRequest,
    GetPaymentStatusResponse,
    GetPaymentStatusUseCase,
)
from menumaster.domain.error import PaymentNotRequiredError
from menumaster.domain.service import JWTService
from menumaster.domain.value import PaymentConfirmationOutcome
from menumaster.interface.api.principal import require_principal

router = APIRouter(prefix="/payment", tags=["payment"], route_class=DishkaRoute)


class ConfirmPaymentAPIRequest(BaseModel):
    """API request for confirming a payment."""

    # Stripe PaymentIntent id returned to the client after checkout
    payment_intent_id: str = Field(min_length=1, max_length=255)

    @field_validator("payment_intent_id")
    @classmethod
    def strip_payment_intent_id(cls, v: str) -> str:
        """Reject ids that are only whitespace."""
        v = v.strip()
        if not v:
            raise ValueError("payment_intent_id must not be blank")
        return v


@router.get("/status", response_model=GetPaymentStatusResponse)
async def get_payment_status(
    use_case: FromDishka[GetPaymentStatusUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetPaymentStatusResponse:
    """Get the current user's payment flags.

    Args:
        use_case: Get payment status use case from DI
        jwt_service: JWT service from DI
        auth_token: JWT token from cookie

    Returns:
        has_paid, is_admin and payment_date
    """
    user_id = require_principal(jwt_service, auth_token)
    return await use_case.execute(GetPaymentStatusRequest(user_id=user_id))


@router.post(
    "/confirm",
    response_model=ConfirmPaymentResponse,
    responses={402: {"model": ConfirmPaymentResponse}},
)
async def confirm_payment(
    request: ConfirmPaymentAPIRequest,
    use_case: FromDishka[ConfirmPaymentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
):
    """Confirm the one-time payment after checkout.

    Repeating the call is safe: a user who already paid gets
    ``already_confirmed`` and nothing changes.

    Args:
        request: Provider confirmation id
        use_case: Confirm payment use case from DI
        jwt_service: JWT service from DI
        auth_token: JWT token from cookie

    Returns:
        Confirmation outcome; 402 if the provider did not confirm the payment
    """
    user_id = require_principal(jwt_service, auth_token)

    response = await use_case.execute(
        ConfirmPaymentRequest(
            user_id=user_id, confirmation_id=request.payment_intent_id
        )
    )

    if response.outcome == PaymentConfirmationOutcome.PROVIDER_VERIFICATION_FAILED:
        return JSONResponse(
            status_code=status.HTTP_402_PAYMENT_REQUIRED,
            content=response.model_dump(mode="json"),
        )
    return response


@router.post("/intent", response_model=CreatePaymentIntentResponse)
async def create_payment_intent(
    use_case: FromDishka[CreatePaymentIntentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreatePaymentIntentResponse:
    """Create the Stripe payment intent for the activation fee.

    Raises:
        HTTPException: 409 if the user is an admin or has already paid
    """
    user_id = require_principal(jwt_service, auth_token)

    try:
        return await use_case.execute(CreatePaymentIntentRequest(user_id=user_id))
    except PaymentNotRequiredError:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Payment not required",
        )


@router.get("/stats", response_model=GetPaymentStatsResponse)
async def get_payment_stats(
    use_case: FromDishka[GetPaymentStatsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetPaymentStatsResponse:
    """Get payment counters. Admin only."""
    user_id = require_principal(jwt_service, auth_token)
    return await use_case.execute(GetPaymentStatsRequest(user_id=user_id))
