"""Payment use cases."""

from menumaster.application.usecase.payment.confirm_payment import (
    ConfirmPaymentRequest,
    ConfirmPaymentResponse,
    ConfirmPaymentUseCase,
)
from menumaster.application.usecase.payment.create_payment_intent import (
    CreatePaymentIntentRequest,
    CreatePaymentIntentResponse,
    CreatePaymentIntentUseCase,
)
from menumaster.application.usecase.payment.get_payment_stats import (
    GetPaymentStatsRequest,
    GetPaymentStatsResponse,
    GetPaymentStatsUseCase,
)
from menumaster.application.usecase.payment.get_payment_status import (
    GetPaymentStatusRequest,
    GetPaymentStatusResponse,
    GetPaymentStatusUseCase,
)

__all__ = [
    "ConfirmPaymentRequest",
    "ConfirmPaymentResponse",
    "ConfirmPaymentUseCase",
    "CreatePaymentIntentRequest",
    "CreatePaymentIntentResponse",
    "CreatePaymentIntentUseCase",
    "GetPaymentStatsRequest",
    "GetPaymentStatsResponse",
    "GetPaymentStatsUseCase",
    "GetPaymentStatusRequest",
    "GetPaymentStatusResponse",
    "GetPaymentStatusUseCase",
]
