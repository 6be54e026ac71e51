"""Invitation routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, Path, Query, status
from pydantic import BaseModel, EmailStr, Field

from menumaster.application.usecase.invitation import (
    CreateInvitationRequest,
    CreateInvitationUseCase,
    DeleteInvitationRequest,
    DeleteInvitationUseCase,
    InvitationItem,
    ListInvitationsRequest,
    ListInvitationsResponse,
    ListInvitationsUseCase,
    RedeemInvitationRequest,
    RedeemInvitationUseCase,
    VerifyInvitationRequest,
    VerifyInvitationResponse,
    VerifyInvitationUseCase,
)
from menumaster.domain.service import JWTService
from menumaster.domain.value import RedemptionError
from menumaster.interface.api.principal import require_principal

router = APIRouter(prefix="/invitations", tags=["invitations"], route_class=DishkaRoute)

_REDEMPTION_STATUS = {
    RedemptionError.NOT_FOUND: (status.HTTP_404_NOT_FOUND, "Invitation not found"),
    RedemptionError.EXPIRED: (status.HTTP_410_GONE, "Invitation has expired"),
    RedemptionError.ALREADY_USED: (
        status.HTTP_409_CONFLICT,
        "Invitation has already been used",
    ),
}


class RedeemInvitationAPIRequest(BaseModel):
    """API request for redeeming an invitation."""

    code: str = Field(min_length=1, max_length=255)


class RedeemInvitationAPIResponse(BaseModel):
    """API response for a successful redemption."""

    restaurant_name: str


class CreateInvitationAPIRequest(BaseModel):
    """API request for creating an invitation."""

    email: EmailStr
    restaurant_name: str = Field(min_length=1, max_length=255)


@router.get("/verify/{code}", response_model=VerifyInvitationResponse)
async def verify_invitation(
    use_case: FromDishka[VerifyInvitationUseCase],
    code: str = Path(min_length=1, max_length=255),
) -> VerifyInvitationResponse:
    """Check an invitation link before the recipient signs up.

    Public: the code itself is the credential.

    Returns:
        Derived status and restaurant; 404 if the code is unknown
    """
    return await use_case.execute(VerifyInvitationRequest(code=code))


@router.post("/redeem", response_model=RedeemInvitationAPIResponse)
async def redeem_invitation(
    request: RedeemInvitationAPIRequest,
    use_case: FromDishka[RedeemInvitationUseCase],
) -> RedeemInvitationAPIResponse:
    """Redeem an invitation code exactly once.

    Raises:
        HTTPException: 404 unknown code, 410 expired, 409 already used
    """
    response = await use_case.execute(RedeemInvitationRequest(code=request.code))

    if response.error is not None:
        status_code, detail = _REDEMPTION_STATUS[response.error]
        raise HTTPException(status_code=status_code, detail=detail)

    return RedeemInvitationAPIResponse(restaurant_name=response.restaurant_name)


@router.post("", response_model=InvitationItem, status_code=status.HTTP_201_CREATED)
async def create_invitation(
    request: CreateInvitationAPIRequest,
    use_case: FromDishka[CreateInvitationUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> InvitationItem:
    """Create an invitation. Admin only.

    Returns:
        The invitation, including the link to send to the recipient
    """
    user_id = require_principal(jwt_service, auth_token)
    return await use_case.execute(
        CreateInvitationRequest(
            user_id=user_id,
            email=request.email,
            restaurant_name=request.restaurant_name,
        )
    )


@router.get("", response_model=ListInvitationsResponse)
async def list_invitations(
    use_case: FromDishka[ListInvitationsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    limit: int = Query(default=50, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
) -> ListInvitationsResponse:
    """List invitations, newest first. Admin only."""
    user_id = require_principal(jwt_service, auth_token)
    return await use_case.execute(
        ListInvitationsRequest(user_id=user_id, limit=limit, offset=offset)
    )


@router.delete("/{invitation_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_invitation(
    invitation_id: UUID,
    use_case: FromDishka[DeleteInvitationUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> None:
    """Delete an invitation. Admin only.

    Returns 404 if the invitation does not exist.
    """
    user_id = require_principal(jwt_service, auth_token)
    await use_case.execute(
        DeleteInvitationRequest(user_id=user_id, invitation_id=str(invitation_id))
    )
