"""Create invitation use case."""

from uuid import UUID

from pydantic import BaseModel, EmailStr, Field

from menumaster.application.usecase.base import BaseUseCase
from menumaster.application.usecase.invitation.list_invitations import InvitationItem
from menumaster.config import Settings
from menumaster.domain.model.common import utcnow
from menumaster.domain.service import InvitationService, UserService
from menumaster.domain.value import UserId


class CreateInvitationRequest(BaseModel):
    """Create invitation request."""

    user_id: str  # Admin user ID from auth
    email: EmailStr
    restaurant_name: str = Field(min_length=1, max_length=255)


class CreateInvitationUseCase(BaseUseCase):
    """Use case for an admin inviting a collaborator to a restaurant."""

    def __init__(
        self,
        invitation_service: InvitationService,
        user_service: UserService,
        settings: Settings,
    ) -> None:
        """Initialize create invitation use case.

        Args:
            invitation_service: Invitation domain service
            user_service: User domain service
            settings: Application settings
        """
        self.invitation_service = invitation_service
        self.user_service = user_service
        self.settings = settings

    async def execute(self, request: CreateInvitationRequest) -> InvitationItem:
        """Execute create invitation flow.

        Steps:
        1. Check the caller is an admin
        2. Create the invitation with a fresh code
        3. Return it with the link to send to the recipient

        Raises:
            NotFoundError: If user not found
            NotAuthorizedError: If the user is not an admin
        """
        admin = await self.user_service.require_admin(
            UserId(UUID(request.user_id)), "create invitations"
        )

        invitation = await self.invitation_service.create_invitation(
            invited_by=admin.id,
            email=str(request.email),
            restaurant_name=request.restaurant_name.strip(),
        )

        return InvitationItem.from_invitation(
            invitation, self.settings.api.frontend_url, utcnow()
        )
