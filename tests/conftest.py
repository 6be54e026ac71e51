"""Test configuration and fixtures."""

from datetime import timedelta
from uuid import uuid4

import logfire

from menumaster.config import AuthSettings
from menumaster.domain.model import Invitation, User
from menumaster.domain.model.common import utcnow
from menumaster.domain.service import JWTService
from menumaster.domain.value import InvitationCode, InvitationId, UserId

# Traces stay local during tests
logfire.configure(send_to_logfire=False, console=False)


def make_user(
    is_admin: bool = False, has_paid: bool = False, email: str | None = None
) -> User:
    """Build a user with fresh ids."""
    return User(
        id=UserId(uuid4()),
        email=email,
        is_admin=is_admin,
        has_paid=has_paid,
        payment_date=utcnow() if has_paid else None,
    )


def make_invitation(
    code: str | None = None,
    restaurant_name: str = "Trattoria da Mario",
    expires_in: timedelta = timedelta(days=30),
    used: bool = False,
) -> Invitation:
    """Build an invitation expiring ``expires_in`` from now."""
    now = utcnow()
    return Invitation(
        id=InvitationId(uuid4()),
        code=InvitationCode(root=code or f"code-{uuid4().hex}"),
        restaurant_name=restaurant_name,
        email="owner@example.com",
        expires_at=now + expires_in,
        created_at=now,
        used_at=now if used else None,
    )


def auth_headers(user: User) -> dict[str, str]:
    """Session cookie header for ``user``, signed with the default auth settings."""
    token = JWTService(AuthSettings()).create_token(str(user.id), user.email)
    return {"Cookie": f"auth_token={token}"}
