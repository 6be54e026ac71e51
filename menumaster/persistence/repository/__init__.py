"""PostgreSQL repository implementations."""

from menumaster.persistence.repository.invitation import PostgresInvitationRepository
from menumaster.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresInvitationRepository",
]
