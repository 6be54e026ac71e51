"""User aggregate root.

Restaurant owners authenticate through the external identity provider.
This service only reads the access flags and records the one-time payment.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from menumaster.domain.model.common import DomainModel, utcnow
from menumaster.domain.value import UserId


class User(DomainModel):
    """User aggregate root.

    Business rules:
    - Admins have unconditional access, paid or not
    - has_paid/payment_date are written once, by a verified payment confirmation
    """

    id: UserId
    email: Optional[str] = None
    is_admin: bool = False
    has_paid: bool = False
    payment_date: Optional[datetime] = None
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
