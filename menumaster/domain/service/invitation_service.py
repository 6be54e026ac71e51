"""Invitation domain service."""

import secrets
from datetime import timedelta
from uuid import uuid4

import logfire

from menumaster.config import InvitationSettings
from menumaster.domain.error import NotFoundError
from menumaster.domain.model.common import utcnow
from menumaster.domain.model.invitation import Invitation
from menumaster.domain.repository import InvitationRepository
from menumaster.domain.value import (
    InvitationCode,
    InvitationId,
    InvitationStatus,
    InvitationView,
    RedemptionError,
    RedemptionResult,
    UserId,
)

from .base import Service


class InvitationService(Service):
    """Domain service for restaurant invitations."""

    def __init__(
        self,
        invitation_repository: InvitationRepository,
        invitation_settings: InvitationSettings,
    ) -> None:
        """Initialize invitation service.

        Args:
            invitation_repository: Invitation repository
            invitation_settings: Invitation settings
        """
        self.invitation_repository = invitation_repository
        self.invitation_settings = invitation_settings

    async def create_invitation(
        self,
        invited_by: UserId,
        email: str,
        restaurant_name: str,
    ) -> Invitation:
        """Create a new invitation with a fresh code.

        Args:
            invited_by: Admin issuing the invitation
            email: Recipient email
            restaurant_name: Restaurant the recipient will manage

        Returns:
            Created invitation
        """
        with logfire.span(
            "invitation_service.create_invitation",
            invited_by=str(invited_by),
            restaurant_name=restaurant_name,
        ):
            now = utcnow()
            invitation = Invitation(
                id=InvitationId(uuid4()),
                code=InvitationCode(root=secrets.token_urlsafe(24)),
                restaurant_name=restaurant_name,
                email=email,
                invited_by=invited_by,
                expires_at=now + timedelta(days=self.invitation_settings.expiry_days),
                created_at=now,
            )

            saved = await self.invitation_repository.save(invitation)
            logfire.info(
                "Invitation created",
                invitation_id=str(saved.id),
                invited_by=str(invited_by),
                expires_at=saved.expires_at.isoformat(),
            )
            return saved

    async def lookup(self, code: InvitationCode) -> InvitationView | None:
        """Look up an invitation and derive its current status.

        Args:
            code: Invitation code

        Returns:
            View of the invitation, or None if the code is unknown
        """
        with logfire.span("invitation_service.lookup", code=code.redacted()):
            invitation = await self.invitation_repository.find_by_code(code)
            if not invitation:
                logfire.info("Invitation not found", code=code.redacted())
                return None

            status = invitation.status_at(utcnow())
            logfire.info(
                "Invitation found",
                invitation_id=str(invitation.id),
                status=status.value,
            )
            return InvitationView(
                restaurant_name=invitation.restaurant_name,
                status=status,
                expires_at=invitation.expires_at,
            )

    async def redeem(self, code: InvitationCode) -> RedemptionResult:
        """Redeem an invitation exactly once.

        Status is derived again here, never taken from an earlier lookup. The
        used_at write is a conditional update, so of two concurrent redemptions
        exactly one succeeds. Redemption does not authenticate anyone; it only
        authorises the next step of the onboarding flow.

        Args:
            code: Invitation code

        Returns:
            The restaurant reference, or why redemption failed

        Raises:
            StoreUnavailableError: If the store cannot be reached or the write fails
        """
        with logfire.span("invitation_service.redeem", code=code.redacted()):
            now = utcnow()
            invitation = await self.invitation_repository.find_by_code(code)
            if not invitation:
                logfire.info("Redemption of unknown code", code=code.redacted())
                return RedemptionResult.failure(RedemptionError.NOT_FOUND)

            failure = self._redemption_error(invitation.status_at(now))
            if failure:
                logfire.info(
                    "Invitation not redeemable",
                    invitation_id=str(invitation.id),
                    reason=failure.value,
                )
                return RedemptionResult.failure(failure)

            if await self.invitation_repository.mark_used(code, now):
                logfire.info(
                    "Invitation redeemed",
                    invitation_id=str(invitation.id),
                    restaurant_name=invitation.restaurant_name,
                )
                return RedemptionResult.success(invitation.restaurant_name)

            # Lost the conditional update: classify from the current record
            current = await self.invitation_repository.find_by_code(code)
            if not current:
                return RedemptionResult.failure(RedemptionError.NOT_FOUND)

            failure = (
                self._redemption_error(current.status_at(now))
                or RedemptionError.ALREADY_USED
            )
            logfire.info(
                "Concurrent redemption lost",
                invitation_id=str(current.id),
                reason=failure.value,
            )
            return RedemptionResult.failure(failure)

    async def list_invitations(
        self, limit: int = 50, offset: int = 0
    ) -> list[Invitation]:
        """List invitations, newest first.

        Args:
            limit: Maximum number of results
            offset: Number of results to skip

        Returns:
            List of invitations
        """
        with logfire.span(
            "invitation_service.list_invitations", limit=limit, offset=offset
        ):
            invitations = await self.invitation_repository.list_all(limit, offset)
            logfire.info("Invitations listed", count=len(invitations))
            return invitations

    async def delete_invitation(self, invitation_id: InvitationId) -> None:
        """Delete an invitation.

        Args:
            invitation_id: Invitation ID

        Raises:
            NotFoundError: If the invitation does not exist
        """
        with logfire.span(
            "invitation_service.delete_invitation", invitation_id=str(invitation_id)
        ):
            deleted = await self.invitation_repository.delete(invitation_id)
            if not deleted:
                raise NotFoundError("Invitation", str(invitation_id))
            logfire.info("Invitation deleted", invitation_id=str(invitation_id))

    @staticmethod
    def _redemption_error(status: InvitationStatus) -> RedemptionError | None:
        if status == InvitationStatus.USED:
            return RedemptionError.ALREADY_USED
        if status == InvitationStatus.EXPIRED:
            return RedemptionError.EXPIRED
        return None
