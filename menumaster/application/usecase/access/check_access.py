"""Check access use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from menumaster.application.usecase.base import BaseUseCase
from menumaster.config import Settings
from menumaster.domain.service import AccessGate, UserService
from menumaster.domain.value import AccessDenialReason, UserId


class CheckAccessRequest(BaseModel):
    """Check access request."""

    user_id: str  # User ID from auth


class CheckAccessResponse(BaseModel):
    """Check access response."""

    allowed: bool
    reason: AccessDenialReason | None = None
    payment_url: str | None = None  # Where a denied principal should go


class CheckAccessUseCase(BaseUseCase):
    """Use case for asking the access gate about the current principal.

    The user is loaded fresh for every call; nothing is cached between
    requests, so a confirmation is visible to the very next check.
    """

    def __init__(
        self,
        user_service: UserService,
        access_gate: AccessGate,
        settings: Settings,
    ) -> None:
        """Initialize check access use case.

        Args:
            user_service: User domain service
            access_gate: Access gate
            settings: Application settings
        """
        self.user_service = user_service
        self.access_gate = access_gate
        self.settings = settings

    async def execute(self, request: CheckAccessRequest) -> CheckAccessResponse:
        """Execute check access flow.

        Raises:
            NotFoundError: If user not found
            StoreUnavailableError: If the store cannot be reached
        """
        with logfire.span("check_access.execute", user_id=request.user_id):
            user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
            decision = self.access_gate.evaluate(user)

            if decision.allowed:
                return CheckAccessResponse(allowed=True)

            logfire.info(
                "Access denied",
                user_id=request.user_id,
                reason=decision.reason.value if decision.reason else None,
            )
            return CheckAccessResponse(
                allowed=False,
                reason=decision.reason,
                payment_url=self.settings.api.payment_url,
            )
