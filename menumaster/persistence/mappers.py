"""Mappers for converting between database rows and domain models.

Domain models are immutable Pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's ORM.
"""

from typing import Any, Dict
from uuid import UUID

from menumaster.domain.model import Invitation, User
from menumaster.domain.value import InvitationCode, InvitationId, UserId


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        email=row.get("email"),
        is_admin=row["is_admin"],
        has_paid=row["has_paid"],
        payment_date=row.get("payment_date"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return user.model_dump()


def row_to_invitation(row: Dict[str, Any]) -> Invitation:
    """Convert database row to Invitation domain model.

    Args:
        row: Database row as dict

    Returns:
        Invitation domain model
    """
    return Invitation(
        id=InvitationId(_uuid(row["id"])),
        code=InvitationCode(root=row["code"]),
        restaurant_name=row["restaurant_name"],
        email=row["email"],
        invited_by=UserId(_uuid(row["invited_by"])) if row.get("invited_by") else None,
        expires_at=row["expires_at"],
        created_at=row["created_at"],
        used_at=row.get("used_at"),
    )


def invitation_to_dict(invitation: Invitation) -> Dict[str, Any]:
    """Convert Invitation domain model to database dict.

    InvitationCode dumps to its plain string value.
    """
    return invitation.model_dump()
