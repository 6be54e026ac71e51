"""Invitation use cases."""

from menumaster.application.usecase.invitation.create_invitation import (
    CreateInvitationRequest,
    CreateInvitationUseCase,
)
from menumaster.application.usecase.invitation.delete_invitation import (
    DeleteInvitationRequest,
    DeleteInvitationUseCase,
)
from menumaster.application.usecase.invitation.list_invitations import (
    InvitationItem,
    ListInvitationsRequest,
    ListInvitationsResponse,
    ListInvitationsUseCase,
)
from menumaster.application.usecase.invitation.redeem_invitation import (
    RedeemInvitationRequest,
    RedeemInvitationResponse,
    RedeemInvitationUseCase,
)
from menumaster.application.usecase.invitation.verify_invitation import (
    VerifyInvitationRequest,
    VerifyInvitationResponse,
    VerifyInvitationUseCase,
)

__all__ = [
    "CreateInvitationRequest",
    "CreateInvitationUseCase",
    "DeleteInvitationRequest",
    "DeleteInvitationUseCase",
    "InvitationItem",
    "ListInvitationsRequest",
    "ListInvitationsResponse",
    "ListInvitationsUseCase",
    "RedeemInvitationRequest",
    "RedeemInvitationResponse",
    "RedeemInvitationUseCase",
    "VerifyInvitationRequest",
    "VerifyInvitationResponse",
    "VerifyInvitationUseCase",
]
