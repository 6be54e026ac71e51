"""List invitations use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from menumaster.application.usecase.base import BaseUseCase
from menumaster.config import Settings
from menumaster.domain.model import Invitation
from menumaster.domain.model.common import utcnow
from menumaster.domain.service import InvitationService, UserService
from menumaster.domain.value import InvitationStatus, UserId


class InvitationItem(BaseModel):
    """Invitation item in response."""

    invitation_id: str
    code: str
    invitation_url: str
    restaurant_name: str
    email: str
    invited_by: str | None = None
    status: InvitationStatus
    expires_at: datetime
    created_at: datetime
    used_at: datetime | None = None

    @classmethod
    def from_invitation(
        cls, invitation: Invitation, frontend_url: str, now: datetime
    ) -> "InvitationItem":
        """Build the admin view of an invitation, status derived at ``now``."""
        return cls(
            invitation_id=str(invitation.id),
            code=invitation.code.root,
            invitation_url=f"{frontend_url}/invite?code={invitation.code.root}",
            restaurant_name=invitation.restaurant_name,
            email=invitation.email,
            invited_by=str(invitation.invited_by) if invitation.invited_by else None,
            status=invitation.status_at(now),
            expires_at=invitation.expires_at,
            created_at=invitation.created_at,
            used_at=invitation.used_at,
        )


class ListInvitationsRequest(BaseModel):
    """List invitations request."""

    user_id: str  # Admin user ID from auth
    limit: int = Field(default=50, ge=1, le=100)
    offset: int = Field(default=0, ge=0)


class ListInvitationsResponse(BaseModel):
    """List invitations response."""

    invitations: list[InvitationItem]
    total: int


class ListInvitationsUseCase(BaseUseCase):
    """Use case for the admin invitation overview."""

    def __init__(
        self,
        invitation_service: InvitationService,
        user_service: UserService,
        settings: Settings,
    ) -> None:
        """Initialize list invitations use case.

        Args:
            invitation_service: Invitation domain service
            user_service: User domain service
            settings: Application settings
        """
        self.invitation_service = invitation_service
        self.user_service = user_service
        self.settings = settings

    async def execute(self, request: ListInvitationsRequest) -> ListInvitationsResponse:
        """Execute list invitations flow.

        Raises:
            NotFoundError: If user not found
            NotAuthorizedError: If the user is not an admin
        """
        await self.user_service.require_admin(
            UserId(UUID(request.user_id)), "list invitations"
        )

        invitations = await self.invitation_service.list_invitations(
            limit=request.limit, offset=request.offset
        )

        now = utcnow()
        frontend_url = self.settings.api.frontend_url
        items = [
            InvitationItem.from_invitation(invitation, frontend_url, now)
            for invitation in invitations
        ]
        return ListInvitationsResponse(invitations=items, total=len(items))
