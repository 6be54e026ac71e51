"""Shared in-memory record store for testing."""

from menumaster.domain.error import StoreUnavailableError
from menumaster.domain.model import Invitation, User
from menumaster.domain.value import InvitationId, UserId


class InMemoryStore:
    """Holds records across requests so repositories can be request-scoped.

    Setting ``unavailable`` makes every repository call fail the way an
    unreachable database would.
    """

    def __init__(self) -> None:
        self.users: dict[UserId, User] = {}
        self.invitations: dict[InvitationId, Invitation] = {}
        self.unavailable = False

    def check_available(self) -> None:
        """Raise if the store has been switched off."""
        if self.unavailable:
            raise StoreUnavailableError("In-memory store is unavailable")
