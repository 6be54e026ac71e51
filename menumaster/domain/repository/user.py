"""User repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from menumaster.domain.model.user import User
from menumaster.domain.value import UserId


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise

        Raises:
            StoreUnavailableError: If the store cannot be reached
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass

    @abstractmethod
    async def mark_paid(self, user_id: UserId, paid_at: datetime) -> bool:
        """Atomically flip an unpaid, non-admin user to paid.

        A single conditional write predicated on ``has_paid = false``.
        Committed before returning so a True result is durable.

        Args:
            user_id: The user's unique identifier
            paid_at: Timestamp recorded as payment_date

        Returns:
            True if this call performed the transition, False otherwise

        Raises:
            StoreUnavailableError: If the write could not be performed
        """
        pass

    @abstractmethod
    async def count(self, has_paid: bool | None = None) -> int:
        """Count users, optionally filtered by payment state.

        Args:
            has_paid: Optional payment state filter

        Returns:
            Number of users
        """
        pass
