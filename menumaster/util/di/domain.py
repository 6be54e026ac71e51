"""Domain layer DI providers."""

from dishka import Scope, provide

from menumaster.config import AuthSettings, InvitationSettings, PaymentSettings
from menumaster.domain.repository import InvitationRepository, UserRepository
from menumaster.domain.service import (
    AccessGate,
    InvitationService,
    JWTService,
    PaymentProvider,
    PaymentService,
    UserService,
)
from menumaster.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_access_gate(self) -> AccessGate:
        """Provide the stateless access gate."""
        return AccessGate()

    @provide(scope=Scope.APP)
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_payment_service(
        self,
        user_repository: UserRepository,
        payment_provider: PaymentProvider,
        payment_settings: PaymentSettings,
    ) -> PaymentService:
        """Provide payment domain service."""
        return PaymentService(
            user_repository=user_repository,
            payment_provider=payment_provider,
            payment_settings=payment_settings,
        )

    @provide
    def get_invitation_service(
        self,
        invitation_repository: InvitationRepository,
        invitation_settings: InvitationSettings,
    ) -> InvitationService:
        """Provide invitation domain service."""
        return InvitationService(
            invitation_repository=invitation_repository,
            invitation_settings=invitation_settings,
        )
