"""Redeem invitation use case."""

from pydantic import BaseModel, Field

from menumaster.application.usecase.base import BaseUseCase
from menumaster.domain.service import InvitationService
from menumaster.domain.value import InvitationCode, RedemptionError


class RedeemInvitationRequest(BaseModel):
    """Redeem invitation request."""

    code: str = Field(min_length=1, max_length=255)


class RedeemInvitationResponse(BaseModel):
    """Redeem invitation response."""

    restaurant_name: str | None = None
    error: RedemptionError | None = None


class RedeemInvitationUseCase(BaseUseCase):
    """Use case for consuming an invitation code."""

    def __init__(self, invitation_service: InvitationService) -> None:
        self.invitation_service = invitation_service

    async def execute(self, request: RedeemInvitationRequest) -> RedeemInvitationResponse:
        """Redeem the invitation.

        Raises:
            StoreUnavailableError: If the store cannot be reached or the write fails
        """
        result = await self.invitation_service.redeem(InvitationCode(root=request.code))
        return RedeemInvitationResponse(
            restaurant_name=result.restaurant_name, error=result.error
        )
