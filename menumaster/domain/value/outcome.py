"""Typed outcomes of the access gate and invitation flows.

Expected business results travel as values, not exceptions. Only store
failures are raised.
"""

from datetime import datetime
from enum import Enum

from menumaster.domain.value.common import ValueObject
from menumaster.domain.value.types import InvitationStatus


class AccessDenialReason(str, Enum):
    """Why the gate refused a principal."""

    PAYMENT_REQUIRED = "payment_required"


class AccessDecision(ValueObject):
    """Result of evaluating the access gate for one user snapshot."""

    allowed: bool
    reason: AccessDenialReason | None = None

    @classmethod
    def allow(cls) -> "AccessDecision":
        return cls(allowed=True)

    @classmethod
    def deny(cls, reason: AccessDenialReason) -> "AccessDecision":
        return cls(allowed=False, reason=reason)


class PaymentConfirmationOutcome(str, Enum):
    """Result kinds of a payment confirmation attempt."""

    OK = "ok"
    ALREADY_CONFIRMED = "already_confirmed"
    PROVIDER_VERIFICATION_FAILED = "provider_verification_failed"
    NOT_REQUIRED = "not_required"


class PaymentConfirmationResult(ValueObject):
    """Outcome of ``PaymentService.confirm_payment``."""

    outcome: PaymentConfirmationOutcome
    payment_date: datetime | None = None

    @property
    def ok(self) -> bool:
        return self.outcome == PaymentConfirmationOutcome.OK


class PaymentVerification(ValueObject):
    """Verdict returned by the payment provider for a confirmation id."""

    succeeded: bool
    user_id: str | None = None  # Metadata attached when the intent was created
    status: str | None = None


class RedemptionError(str, Enum):
    """Why an invitation could not be redeemed."""

    NOT_FOUND = "not_found"
    EXPIRED = "expired"
    ALREADY_USED = "already_used"


class RedemptionResult(ValueObject):
    """Outcome of ``InvitationService.redeem``."""

    restaurant_name: str | None = None
    error: RedemptionError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, restaurant_name: str) -> "RedemptionResult":
        return cls(restaurant_name=restaurant_name)

    @classmethod
    def failure(cls, error: RedemptionError) -> "RedemptionResult":
        return cls(error=error)


class InvitationView(ValueObject):
    """What a lookup exposes about an invitation. Never carries the code."""

    restaurant_name: str
    status: InvitationStatus
    expires_at: datetime
