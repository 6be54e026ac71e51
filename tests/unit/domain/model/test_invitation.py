"""Unit tests for Invitation status derivation."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

from menumaster.domain.model import Invitation
from menumaster.domain.value import (
    InvitationCode,
    InvitationId,
    InvitationStatus,
)

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


def _invitation(expires_at: datetime, used_at: datetime | None = None) -> Invitation:
    return Invitation(
        id=InvitationId(uuid4()),
        code=InvitationCode(root="abc123"),
        restaurant_name="Osteria",
        email="chef@example.com",
        expires_at=expires_at,
        created_at=NOW - timedelta(days=1),
        used_at=used_at,
    )


class TestStatusAt:
    """Tests for Invitation.status_at."""

    def test_unused_before_expiry_is_valid(self):
        invitation = _invitation(expires_at=NOW + timedelta(days=1))

        assert invitation.status_at(NOW) == InvitationStatus.VALID

    def test_expiry_instant_itself_is_still_valid(self):
        """Expired means strictly past expires_at."""
        invitation = _invitation(expires_at=NOW)

        assert invitation.status_at(NOW) == InvitationStatus.VALID

    def test_unused_after_expiry_is_expired(self):
        invitation = _invitation(expires_at=NOW - timedelta(seconds=1))

        assert invitation.status_at(NOW) == InvitationStatus.EXPIRED

    def test_used_wins_over_expired(self):
        """A redeemed invitation stays used after its expiry passes."""
        invitation = _invitation(
            expires_at=NOW - timedelta(days=5),
            used_at=NOW - timedelta(days=10),
        )

        assert invitation.status_at(NOW) == InvitationStatus.USED

    def test_status_depends_only_on_the_reference_time(self):
        invitation = _invitation(expires_at=NOW)

        assert invitation.status_at(NOW - timedelta(hours=1)) == InvitationStatus.VALID
        assert invitation.status_at(NOW + timedelta(hours=1)) == InvitationStatus.EXPIRED
        # Deriving a status never touches the record
        assert invitation.used_at is None
