"""Domain value objects for MenuMaster."""

from menumaster.domain.value.identifiers import InvitationId, UserId
from menumaster.domain.value.outcome import (
    AccessDecision,
    AccessDenialReason,
    InvitationView,
    PaymentConfirmationOutcome,
    PaymentConfirmationResult,
    PaymentVerification,
    RedemptionError,
    RedemptionResult,
)
from menumaster.domain.value.types import (
    InvitationCode,
    InvitationStatus,
    PaymentConfirmationId,
)

__all__ = [
    # Identifiers
    "UserId",
    "InvitationId",
    # Types
    "InvitationCode",
    "InvitationStatus",
    "PaymentConfirmationId",
    # Outcomes
    "AccessDecision",
    "AccessDenialReason",
    "InvitationView",
    "PaymentConfirmationOutcome",
    "PaymentConfirmationResult",
    "PaymentVerification",
    "RedemptionError",
    "RedemptionResult",
]
