"""In-memory user repository for testing."""

from datetime import datetime
from typing import Optional

from sqlalchemy.exc import IntegrityError

from menumaster.domain.model.user import User
from menumaster.domain.repository.user import UserRepository
from menumaster.domain.value import UserId
from menumaster.persistence.repository.inmemory.store import InMemoryStore


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        self._store.check_available()
        return self._store.users.get(user_id)

    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Raises:
            IntegrityError: If another user already has this email
        """
        self._store.check_available()
        if user.email is not None:
            for existing in self._store.users.values():
                if existing.id != user.id and existing.email == user.email:
                    raise IntegrityError("Duplicate email", None, Exception())
        self._store.users[user.id] = user
        return user

    async def mark_paid(self, user_id: UserId, paid_at: datetime) -> bool:
        """Flip has_paid if the user is unpaid and not an admin."""
        # No await between the check and the write
        self._store.check_available()
        user = self._store.users.get(user_id)
        if user is None or user.has_paid or user.is_admin:
            return False
        self._store.users[user_id] = user.model_copy(
            update={"has_paid": True, "payment_date": paid_at, "updated_at": paid_at}
        )
        return True

    async def count(self, has_paid: bool | None = None) -> int:
        """Count users, optionally by payment state."""
        self._store.check_available()
        return sum(
            1
            for user in self._store.users.values()
            if has_paid is None or user.has_paid == has_paid
        )
