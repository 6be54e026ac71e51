"""API tests for invitation routes."""

import asyncio
from datetime import timedelta
from uuid import uuid4

import pytest

from tests.conftest import auth_headers, make_invitation, make_user
from tests.harness import create_api_fixture

api_env = create_api_fixture()


class TestVerifyInvitation:
    """Tests for GET /invitations/verify/{code}."""

    @pytest.mark.asyncio
    async def test_valid_code(self, api_env):
        await api_env.seed(make_invitation(code="abc", restaurant_name="Da Gino"))

        response = await api_env.client.get("/invitations/verify/abc")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "valid"
        assert body["restaurant_name"] == "Da Gino"
        assert "code" not in body

    @pytest.mark.asyncio
    async def test_unknown_code_is_404(self, api_env):
        response = await api_env.client.get("/invitations/verify/nope")

        assert response.status_code == 404


class TestRedeemInvitation:
    """Tests for POST /invitations/redeem."""

    @pytest.mark.asyncio
    async def test_redeem_then_reuse(self, api_env):
        await api_env.seed(make_invitation(code="once", restaurant_name="Da Gino"))

        first = await api_env.client.post("/invitations/redeem", json={"code": "once"})
        second = await api_env.client.post("/invitations/redeem", json={"code": "once"})

        assert first.status_code == 200
        assert first.json() == {"restaurant_name": "Da Gino"}
        assert second.status_code == 409

    @pytest.mark.asyncio
    async def test_expired_is_410(self, api_env):
        await api_env.seed(make_invitation(code="old", expires_in=timedelta(days=-1)))

        response = await api_env.client.post("/invitations/redeem", json={"code": "old"})

        assert response.status_code == 410

    @pytest.mark.asyncio
    async def test_unknown_is_404(self, api_env):
        response = await api_env.client.post(
            "/invitations/redeem", json={"code": "missing"}
        )

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_parallel_redemptions_have_one_winner(self, api_env):
        await api_env.seed(make_invitation(code="race"))

        responses = await asyncio.gather(
            api_env.client.post("/invitations/redeem", json={"code": "race"}),
            api_env.client.post("/invitations/redeem", json={"code": "race"}),
        )

        assert sorted(r.status_code for r in responses) == [200, 409]


class TestAdminInvitations:
    """Tests for the admin invitation routes."""

    @pytest.mark.asyncio
    async def test_create_list_delete(self, api_env):
        # Arrange
        admin = make_user(is_admin=True)
        await api_env.seed(admin)
        headers = auth_headers(admin)

        # Act
        created = await api_env.client.post(
            "/invitations",
            json={"email": "owner@example.com", "restaurant_name": "Da Gino"},
            headers=headers,
        )
        listed = await api_env.client.get("/invitations", headers=headers)
        invitation_id = created.json()["invitation_id"]
        deleted = await api_env.client.delete(
            f"/invitations/{invitation_id}", headers=headers
        )
        deleted_again = await api_env.client.delete(
            f"/invitations/{invitation_id}", headers=headers
        )

        # Assert
        assert created.status_code == 201
        assert created.json()["status"] == "valid"
        assert "/invite?code=" in created.json()["invitation_url"]
        assert listed.json()["total"] == 1
        assert deleted.status_code == 204
        assert deleted_again.status_code == 404

    @pytest.mark.asyncio
    async def test_non_admin_cannot_create(self, api_env):
        user = make_user(has_paid=True)
        await api_env.seed(user)

        response = await api_env.client.post(
            "/invitations",
            json={"email": "owner@example.com", "restaurant_name": "Da Gino"},
            headers=auth_headers(user),
        )

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_list_requires_auth(self, api_env):
        response = await api_env.client.get("/invitations")

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_delete_unknown_is_404(self, api_env):
        admin = make_user(is_admin=True)
        await api_env.seed(admin)

        response = await api_env.client.delete(
            f"/invitations/{uuid4()}", headers=auth_headers(admin)
        )

        assert response.status_code == 404
