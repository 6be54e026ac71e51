"""Verify invitation use case."""

from datetime import datetime

from pydantic import BaseModel

from menumaster.application.usecase.base import BaseUseCase
from menumaster.domain.error import NotFoundError
from menumaster.domain.service import InvitationService
from menumaster.domain.value import InvitationCode, InvitationStatus


class VerifyInvitationRequest(BaseModel):
    """Verify invitation request."""

    code: str


class VerifyInvitationResponse(BaseModel):
    """Verify invitation response. Never includes the code itself."""

    status: InvitationStatus
    restaurant_name: str
    expires_at: datetime


class VerifyInvitationUseCase(BaseUseCase):
    """Use case for checking an invitation link before redemption.

    This allows the frontend to show the restaurant and whether the link
    still works before the recipient signs up.
    """

    def __init__(self, invitation_service: InvitationService) -> None:
        """Initialize verify invitation use case.

        Args:
            invitation_service: Invitation domain service
        """
        self.invitation_service = invitation_service

    async def execute(self, request: VerifyInvitationRequest) -> VerifyInvitationResponse:
        """Look up an invitation by code.

        Raises:
            NotFoundError: If no invitation has this code
        """
        code = InvitationCode(root=request.code)
        view = await self.invitation_service.lookup(code)
        if view is None:
            raise NotFoundError("Invitation", code.redacted())

        return VerifyInvitationResponse(
            status=view.status,
            restaurant_name=view.restaurant_name,
            expires_at=view.expires_at,
        )
