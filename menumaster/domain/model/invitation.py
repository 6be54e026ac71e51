"""Invitation entity.

Invitations let an administrator hand a restaurant over to a collaborator.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from menumaster.domain.model.common import DomainModel, utcnow
from menumaster.domain.value import (
    InvitationCode,
    InvitationId,
    InvitationStatus,
    UserId,
)


class Invitation(DomainModel):
    """Invitation entity - time-bounded and single-use.

    Business rules:
    - Status is never stored; see ``status_at``
    - used_at is written exactly once, on successful redemption
    - Expiry is a function of time, the record is not touched when it happens
    """

    id: InvitationId
    code: InvitationCode
    restaurant_name: str
    email: str
    invited_by: Optional[UserId] = None
    expires_at: datetime
    created_at: datetime = Field(default_factory=utcnow)
    used_at: Optional[datetime] = None

    def status_at(self, now: datetime) -> InvitationStatus:
        """Derive the invitation status at ``now``.

        used wins over expired: a redeemed invitation stays used forever.
        """
        if self.used_at is not None:
            return InvitationStatus.USED
        if self.expires_at < now:
            return InvitationStatus.EXPIRED
        return InvitationStatus.VALID
