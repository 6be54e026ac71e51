"""Invitation repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime

from menumaster.domain.model.invitation import Invitation
from menumaster.domain.value import InvitationCode, InvitationId


class InvitationRepository(ABC):
    """Repository for Invitation entity.

    Defines the contract for invitation persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, invitation_id: InvitationId) -> Invitation | None:
        """Find an invitation by ID.

        Args:
            invitation_id: The invitation's unique identifier

        Returns:
            The invitation if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_code(self, code: InvitationCode) -> Invitation | None:
        """Find an invitation by code.

        Used when a recipient opens an invitation link.

        Args:
            code: The invitation code

        Returns:
            The invitation if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, invitation: Invitation) -> Invitation:
        """Save an invitation (create or update).

        Committed before returning.

        Args:
            invitation: The invitation to save

        Returns:
            The saved invitation
        """
        pass

    @abstractmethod
    async def mark_used(self, code: InvitationCode, used_at: datetime) -> bool:
        """Atomically mark a redeemable invitation as used.

        A single conditional write predicated on ``used_at IS NULL`` and
        ``expires_at >= used_at``. Committed before returning so a True
        result is durable.

        Args:
            code: The invitation code
            used_at: Redemption timestamp, also the expiry reference point

        Returns:
            True if this call redeemed the invitation, False otherwise

        Raises:
            StoreUnavailableError: If the write could not be performed
        """
        pass

    @abstractmethod
    async def list_all(self, limit: int = 50, offset: int = 0) -> list[Invitation]:
        """List invitations, newest first.

        Args:
            limit: Maximum number of results
            offset: Number of results to skip

        Returns:
            List of invitations
        """
        pass

    @abstractmethod
    async def delete(self, invitation_id: InvitationId) -> bool:
        """Delete an invitation.

        Committed before returning.

        Args:
            invitation_id: The invitation's unique identifier

        Returns:
            True if a record was deleted, False if none existed
        """
        pass
