"""User domain service."""

import logfire

from menumaster.domain.error import NotAuthorizedError, NotFoundError
from menumaster.domain.model import User
from menumaster.domain.repository import UserRepository
from menumaster.domain.value import UserId

from .base import Service


class UserService(Service):
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def require_admin(self, user_id: UserId, action: str) -> User:
        """Load a user and check they are an administrator.

        Args:
            user_id: User ID
            action: Human-readable action, used in the error message

        Returns:
            The admin user

        Raises:
            NotFoundError: If user not found
            NotAuthorizedError: If the user is not an admin
        """
        user = await self.get_by_id(user_id)
        if not user.is_admin:
            logfire.warn("Admin action refused", user_id=str(user_id), action=action)
            raise NotAuthorizedError(action, str(user_id))
        return user

    async def save(self, user: User) -> User:
        """Save user (create or update).

        Args:
            user: User to save

        Returns:
            Saved user
        """
        with logfire.span("user_service.save", user_id=str(user.id)):
            saved = await self.user_repository.save(user)
            logfire.info("User saved", user_id=str(saved.id))
            return saved
