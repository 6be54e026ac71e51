"""Domain services."""

from .access_gate import AccessGate
from .base import Service
from .invitation_service import InvitationService
from .jwt_service import JWTService
from .payment_service import (
    PaymentIntent,
    PaymentProvider,
    PaymentService,
    PaymentStats,
)
from .user_service import UserService

__all__ = [
    "AccessGate",
    "InvitationService",
    "JWTService",
    "PaymentIntent",
    "PaymentProvider",
    "PaymentService",
    "PaymentStats",
    "Service",
    "UserService",
]
