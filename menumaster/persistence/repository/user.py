"""PostgreSQL implementation of User repository."""

from datetime import datetime
from typing import Optional

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from menumaster.domain.model import User
from menumaster.domain.repository import UserRepository
from menumaster.domain.value import UserId
from menumaster.persistence.database import store_errors
from menumaster.persistence.mappers import row_to_user, user_to_dict
from menumaster.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: User ID to look up

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.id == user_id)
        async with store_errors("find_user"):
            result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: User to save

        Returns:
            Saved user
        """
        user_dict = user_to_dict(user)

        async with store_errors("save_user"):
            existing = await self.find_by_id(user.id)
            if existing:
                stmt = (
                    update(users_table)
                    .where(users_table.c.id == user.id)
                    .values(**user_dict)
                )
            else:
                stmt = users_table.insert().values(**user_dict)
            await self.session.execute(stmt)
            await self.session.flush()
        return user

    async def mark_paid(self, user_id: UserId, paid_at: datetime) -> bool:
        """Flip has_paid with a conditional update and commit it.

        Args:
            user_id: User ID to update
            paid_at: Payment timestamp

        Returns:
            True if exactly this call performed the transition
        """
        stmt = (
            update(users_table)
            .where(
                users_table.c.id == user_id,
                users_table.c.has_paid.is_(False),
                users_table.c.is_admin.is_(False),
            )
            .values(has_paid=True, payment_date=paid_at, updated_at=paid_at)
        )
        async with store_errors("mark_user_paid"):
            result = await self.session.execute(stmt)
            await self.session.commit()
        return result.rowcount == 1

    async def count(self, has_paid: bool | None = None) -> int:
        """Count users, optionally by payment state.

        Args:
            has_paid: Optional payment state filter

        Returns:
            Count of matching users
        """
        stmt = select(func.count()).select_from(users_table)
        if has_paid is not None:
            stmt = stmt.where(users_table.c.has_paid.is_(has_paid))

        async with store_errors("count_users"):
            result = await self.session.execute(stmt)
        return result.scalar() or 0
