"""PostgreSQL implementation of Invitation repository."""

from datetime import datetime
from typing import Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from menumaster.domain.model import Invitation
from menumaster.domain.repository import InvitationRepository
from menumaster.domain.value import InvitationCode, InvitationId
from menumaster.persistence.database import store_errors
from menumaster.persistence.mappers import invitation_to_dict, row_to_invitation
from menumaster.persistence.tables import invitations_table


class PostgresInvitationRepository(InvitationRepository):
    """PostgreSQL implementation of InvitationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, invitation_id: InvitationId) -> Optional[Invitation]:
        """Find an invitation by ID.

        Args:
            invitation_id: Invitation ID to look up

        Returns:
            Invitation if found, None otherwise
        """
        stmt = select(invitations_table).where(invitations_table.c.id == invitation_id)
        async with store_errors("find_invitation"):
            result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invitation(dict(row)) if row else None

    async def find_by_code(self, code: InvitationCode) -> Optional[Invitation]:
        """Find an invitation by its code.

        Args:
            code: Invitation code to look up

        Returns:
            Invitation if found, None otherwise
        """
        stmt = select(invitations_table).where(invitations_table.c.code == code.root)
        async with store_errors("find_invitation_by_code"):
            result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invitation(dict(row)) if row else None

    async def save(self, invitation: Invitation) -> Invitation:
        """Save an invitation (create or update) and commit it.

        Committed here so a created invitation link is never reported for a
        row that is later rolled back.

        Args:
            invitation: Invitation to save

        Returns:
            Saved invitation
        """
        invitation_dict = invitation_to_dict(invitation)

        async with store_errors("save_invitation"):
            existing = await self.find_by_id(invitation.id)
            if existing:
                stmt = (
                    update(invitations_table)
                    .where(invitations_table.c.id == invitation.id)
                    .values(**invitation_dict)
                )
            else:
                stmt = insert(invitations_table).values(**invitation_dict)
            await self.session.execute(stmt)
            await self.session.commit()
        return invitation

    async def mark_used(self, code: InvitationCode, used_at: datetime) -> bool:
        """Set used_at with a conditional update and commit it.

        Args:
            code: Invitation code
            used_at: Redemption timestamp

        Returns:
            True if exactly this call redeemed the invitation
        """
        stmt = (
            update(invitations_table)
            .where(
                invitations_table.c.code == code.root,
                invitations_table.c.used_at.is_(None),
                invitations_table.c.expires_at >= used_at,
            )
            .values(used_at=used_at)
        )
        async with store_errors("mark_invitation_used"):
            result = await self.session.execute(stmt)
            await self.session.commit()
        return result.rowcount == 1

    async def list_all(self, limit: int = 50, offset: int = 0) -> list[Invitation]:
        """List invitations, newest first.

        Args:
            limit: Maximum number of results
            offset: Number of results to skip

        Returns:
            List of invitations
        """
        stmt = (
            select(invitations_table)
            .order_by(invitations_table.c.created_at.desc())
            .limit(limit)
            .offset(offset)
        )
        async with store_errors("list_invitations"):
            result = await self.session.execute(stmt)
        rows = result.mappings().all()
        return [row_to_invitation(dict(row)) for row in rows]

    async def delete(self, invitation_id: InvitationId) -> bool:
        """Delete an invitation and commit it.

        Args:
            invitation_id: Invitation ID

        Returns:
            True if a row was deleted
        """
        stmt = delete(invitations_table).where(invitations_table.c.id == invitation_id)
        async with store_errors("delete_invitation"):
            result = await self.session.execute(stmt)
            await self.session.commit()
        return result.rowcount > 0
