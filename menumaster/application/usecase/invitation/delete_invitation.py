"""Delete invitation use case."""

from uuid import UUID

from pydantic import BaseModel

from menumaster.application.usecase.base import BaseUseCase
from menumaster.domain.service import InvitationService, UserService
from menumaster.domain.value import InvitationId, UserId


class DeleteInvitationRequest(BaseModel):
    """Delete invitation request."""

    user_id: str  # Admin user ID from auth
    invitation_id: str


class DeleteInvitationUseCase(BaseUseCase):
    """Use case for revoking an invitation."""

    def __init__(
        self, invitation_service: InvitationService, user_service: UserService
    ) -> None:
        self.invitation_service = invitation_service
        self.user_service = user_service

    async def execute(self, request: DeleteInvitationRequest) -> None:
        """Execute delete invitation flow.

        Raises:
            NotFoundError: If the user or the invitation is not found
            NotAuthorizedError: If the user is not an admin
        """
        await self.user_service.require_admin(
            UserId(UUID(request.user_id)), "delete invitations"
        )
        await self.invitation_service.delete_invitation(
            InvitationId(UUID(request.invitation_id))
        )
