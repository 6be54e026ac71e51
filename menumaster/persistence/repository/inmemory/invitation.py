"""In-memory invitation repository for testing."""

from datetime import datetime
from typing import Optional

from sqlalchemy.exc import IntegrityError

from menumaster.domain.model.invitation import Invitation
from menumaster.domain.repository.invitation import InvitationRepository
from menumaster.domain.value import InvitationCode, InvitationId
from menumaster.persistence.repository.inmemory.store import InMemoryStore


class InMemoryInvitationRepository(InvitationRepository):
    """In-memory implementation of InvitationRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    def _by_code(self, code: InvitationCode) -> Optional[Invitation]:
        for invitation in self._store.invitations.values():
            if invitation.code == code:
                return invitation
        return None

    async def find_by_id(self, invitation_id: InvitationId) -> Optional[Invitation]:
        """Find an invitation by ID."""
        self._store.check_available()
        return self._store.invitations.get(invitation_id)

    async def find_by_code(self, code: InvitationCode) -> Optional[Invitation]:
        """Find an invitation by its code."""
        self._store.check_available()
        return self._by_code(code)

    async def save(self, invitation: Invitation) -> Invitation:
        """Save an invitation (create or update).

        Raises:
            IntegrityError: If another invitation already uses this code
        """
        self._store.check_available()
        existing = self._by_code(invitation.code)
        if existing is not None and existing.id != invitation.id:
            raise IntegrityError("Duplicate invitation code", None, Exception())
        self._store.invitations[invitation.id] = invitation
        return invitation

    async def mark_used(self, code: InvitationCode, used_at: datetime) -> bool:
        """Set used_at if the invitation is unused and not expired."""
        # No await between the check and the write
        self._store.check_available()
        invitation = self._by_code(code)
        if (
            invitation is None
            or invitation.used_at is not None
            or invitation.expires_at < used_at
        ):
            return False
        self._store.invitations[invitation.id] = invitation.model_copy(
            update={"used_at": used_at}
        )
        return True

    async def list_all(self, limit: int = 50, offset: int = 0) -> list[Invitation]:
        """List invitations, newest first."""
        self._store.check_available()
        invitations = sorted(
            self._store.invitations.values(),
            key=lambda inv: inv.created_at,
            reverse=True,
        )
        return invitations[offset : offset + limit]

    async def delete(self, invitation_id: InvitationId) -> bool:
        """Delete an invitation."""
        self._store.check_available()
        return self._store.invitations.pop(invitation_id, None) is not None
