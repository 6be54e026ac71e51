"""Access gate for payment-gated functionality."""

from menumaster.domain.model import User
from menumaster.domain.value import AccessDecision, AccessDenialReason

from .base import Service


class AccessGate(Service):
    """Single admission decision shared by every protected entry point.

    The gate is pure: it looks only at the snapshot it is given. Callers
    must load a fresh user right before asking.
    """

    def evaluate(self, user: User) -> AccessDecision:
        """Decide whether ``user`` may reach payment-gated functionality.

        Admins are exempt from payment. There is no audit trail for that
        exemption; it is a policy choice carried over as-is.

        Args:
            user: Freshly loaded user snapshot

        Returns:
            Allowed, or denied with PAYMENT_REQUIRED
        """
        if user.is_admin or user.has_paid:
            return AccessDecision.allow()
        return AccessDecision.deny(AccessDenialReason.PAYMENT_REQUIRED)
