"""Domain value objects for MenuMaster.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from pydantic import field_validator

from menumaster.domain.value.common import RootValueObject


class InvitationStatus(str, Enum):
    """Status of an invitation, derived from its timestamps at read time."""

    VALID = "valid"
    EXPIRED = "expired"
    USED = "used"


class InvitationCode(RootValueObject[str]):
    """Opaque URL-safe invitation code."""

    @field_validator("root")
    @classmethod
    def validate_code_format(cls, v: str) -> str:
        """Validate code is not empty."""
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Invitation code must be 1-255 characters")
        return v

    def redacted(self) -> str:
        """Short prefix safe to put in logs."""
        return self.root[:8] + "..."


class PaymentConfirmationId(RootValueObject[str]):
    """Provider-issued confirmation id (a Stripe PaymentIntent id)."""

    @field_validator("root")
    @classmethod
    def validate_confirmation_id(cls, v: str) -> str:
        """Validate id is not empty."""
        v = v.strip()
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Confirmation id must be 1-255 characters")
        return v
