"""Application layer DI providers."""

from dishka import Scope, provide

from menumaster.application.usecase.access import CheckAccessUseCase
from menumaster.application.usecase.invitation import (
    CreateInvitationUseCase,
    DeleteInvitationUseCase,
    ListInvitationsUseCase,
    RedeemInvitationUseCase,
    VerifyInvitationUseCase,
)
from menumaster.application.usecase.payment import (
    ConfirmPaymentUseCase,
    CreatePaymentIntentUseCase,
    GetPaymentStatsUseCase,
    GetPaymentStatusUseCase,
)
from menumaster.config import Settings
from menumaster.domain.service import (
    AccessGate,
    InvitationService,
    PaymentService,
    UserService,
)
from menumaster.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Access use cases
    @provide(scope=Scope.REQUEST)
    def get_check_access_use_case(
        self,
        user_service: UserService,
        access_gate: AccessGate,
        settings: Settings,
    ) -> CheckAccessUseCase:
        """Provide check access use case."""
        return CheckAccessUseCase(
            user_service=user_service, access_gate=access_gate, settings=settings
        )

    # Payment use cases
    @provide(scope=Scope.REQUEST)
    def get_payment_status_use_case(
        self, user_service: UserService
    ) -> GetPaymentStatusUseCase:
        """Provide get payment status use case."""
        return GetPaymentStatusUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_confirm_payment_use_case(
        self, payment_service: PaymentService
    ) -> ConfirmPaymentUseCase:
        """Provide confirm payment use case."""
        return ConfirmPaymentUseCase(payment_service=payment_service)

    @provide(scope=Scope.REQUEST)
    def get_create_payment_intent_use_case(
        self, payment_service: PaymentService
    ) -> CreatePaymentIntentUseCase:
        """Provide create payment intent use case."""
        return CreatePaymentIntentUseCase(payment_service=payment_service)

    @provide(scope=Scope.REQUEST)
    def get_payment_stats_use_case(
        self, payment_service: PaymentService, user_service: UserService
    ) -> GetPaymentStatsUseCase:
        """Provide get payment stats use case."""
        return GetPaymentStatsUseCase(
            payment_service=payment_service, user_service=user_service
        )

    # Invitation use cases
    @provide(scope=Scope.REQUEST)
    def get_verify_invitation_use_case(
        self, invitation_service: InvitationService
    ) -> VerifyInvitationUseCase:
        """Provide verify invitation use case."""
        return VerifyInvitationUseCase(invitation_service=invitation_service)

    @provide(scope=Scope.REQUEST)
    def get_redeem_invitation_use_case(
        self, invitation_service: InvitationService
    ) -> RedeemInvitationUseCase:
        """Provide redeem invitation use case."""
        return RedeemInvitationUseCase(invitation_service=invitation_service)

    @provide(scope=Scope.REQUEST)
    def get_create_invitation_use_case(
        self,
        invitation_service: InvitationService,
        user_service: UserService,
        settings: Settings,
    ) -> CreateInvitationUseCase:
        """Provide create invitation use case."""
        return CreateInvitationUseCase(
            invitation_service=invitation_service,
            user_service=user_service,
            settings=settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_invitations_use_case(
        self,
        invitation_service: InvitationService,
        user_service: UserService,
        settings: Settings,
    ) -> ListInvitationsUseCase:
        """Provide list invitations use case."""
        return ListInvitationsUseCase(
            invitation_service=invitation_service,
            user_service=user_service,
            settings=settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_invitation_use_case(
        self, invitation_service: InvitationService, user_service: UserService
    ) -> DeleteInvitationUseCase:
        """Provide delete invitation use case."""
        return DeleteInvitationUseCase(
            invitation_service=invitation_service, user_service=user_service
        )
