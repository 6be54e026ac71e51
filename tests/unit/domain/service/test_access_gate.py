"""Unit tests for AccessGate."""

import pytest

from menumaster.domain.service import AccessGate
from menumaster.domain.value import AccessDenialReason
from tests.conftest import make_user


class TestEvaluate:
    """Tests for AccessGate.evaluate."""

    @pytest.mark.parametrize(
        "is_admin, has_paid, allowed",
        [
            (False, False, False),
            (False, True, True),
            (True, False, True),
            (True, True, True),
        ],
    )
    def test_allowed_iff_admin_or_paid(self, is_admin, has_paid, allowed):
        user = make_user(is_admin=is_admin, has_paid=has_paid)

        decision = AccessGate().evaluate(user)

        assert decision.allowed is allowed

    def test_denial_carries_payment_required(self):
        decision = AccessGate().evaluate(make_user())

        assert decision.allowed is False
        assert decision.reason == AccessDenialReason.PAYMENT_REQUIRED

    def test_allowed_decision_has_no_reason(self):
        decision = AccessGate().evaluate(make_user(has_paid=True))

        assert decision.reason is None

    def test_evaluate_does_not_change_the_user(self):
        user = make_user()

        AccessGate().evaluate(user)

        assert user.has_paid is False
        assert user.payment_date is None
