"""
Тесты регистрации, входа и доступа по Bearer токену.
"""

import pytest

from shelter.core.security import PasswordManager, TokenManager
from shelter.services.v1.auth import AuthService

API = "/api/v1"
CREDENTIALS = {"email": "Admin@Cows-Shelter.org", "password": "secret123"}


async def register(client, **overrides):
    return await client.post(f"{API}/user", json={**CREDENTIALS, **overrides})


async def login(client, **overrides):
    return await client.post(f"{API}/login", json={**CREDENTIALS, **overrides})


class TestRegistration:

    async def test_register(self, anonymous_client):
        response = await register(anonymous_client)

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["email"] == "admin@cows-shelter.org"
        assert data["role"] == "user"
        assert "password" not in data and "password_hash" not in data

    async def test_duplicate(self, anonymous_client):
        await register(anonymous_client)

        response = await register(anonymous_client, email="admin@cows-shelter.org")

        assert response.status_code == 409
        assert response.json()["error"]["type"] == "user_exists"

    @pytest.mark.parametrize(
        "payload",
        [
            {"email": "not-an-email", "password": "secret123"},
            {"email": "user@cows-shelter.org", "password": "123"},
            {"email": "user@cows-shelter.org"},
        ],
    )
    async def test_invalid_payload(self, anonymous_client, payload):
        response = await anonymous_client.post(f"{API}/user", json=payload)
        assert response.status_code == 400


class TestLogin:

    async def test_login(self, anonymous_client):
        user = (await register(anonymous_client)).json()["data"]

        response = await login(anonymous_client)

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["token_type"] == "Bearer"
        assert data["expires_in"] > 0
        assert data["user"]["id"] == user["id"]

        payload = TokenManager.decode_token(data["access_token"])
        assert payload["sub"] == str(user["id"])

    async def test_wrong_password(self, anonymous_client):
        await register(anonymous_client)

        response = await login(anonymous_client, password="wrong-password")

        assert response.status_code == 401
        assert response.json()["error"]["type"] == "invalid_credentials"

    async def test_unknown_user(self, anonymous_client):
        response = await login(anonymous_client, email="ghost@cows-shelter.org")
        assert response.status_code == 401


class TestProtectedAccess:

    @pytest.fixture
    async def token(self, anonymous_client):
        await register(anonymous_client)
        return (await login(anonymous_client)).json()["data"]["access_token"]

    async def test_get_user(self, anonymous_client, token):
        response = await anonymous_client.get(
            f"{API}/user/1", headers={"Authorization": f"Bearer {token}"}
        )

        assert response.status_code == 200
        assert response.json()["data"]["email"] == "admin@cows-shelter.org"

    async def test_get_missing_user(self, anonymous_client, token):
        response = await anonymous_client.get(
            f"{API}/user/42", headers={"Authorization": f"Bearer {token}"}
        )

        assert response.status_code == 404
        assert response.json()["error"]["type"] == "user_not_found"

    async def test_get_user_without_token(self, anonymous_client):
        response = await anonymous_client.get(f"{API}/user/1")
        assert response.status_code == 401

    async def test_create_content_with_token(self, anonymous_client, token):
        response = await anonymous_client.post(
            f"{API}/reviews",
            json={
                "name_en": "Olena",
                "name_ua": "Олена",
                "review_en": "Lovely",
                "review_ua": "Чудово",
            },
            headers={"Authorization": f"Bearer {token}"},
        )

        assert response.status_code == 201

    async def test_token_of_deleted_user(self, anonymous_client):
        token = TokenManager.create_access_token(99, "ghost@cows-shelter.org", "admin")

        response = await anonymous_client.get(
            f"{API}/user/99", headers={"Authorization": f"Bearer {token}"}
        )

        assert response.status_code == 401
        assert response.json()["error"]["type"] == "token_invalid"


class TestCreateAdmin:

    async def test_create_and_promote(self, session_factory):
        async with session_factory() as session:
            service = AuthService(session)
            await service.register("keeper@cows-shelter.org", "secret123")

            admin = await service.create_admin("Keeper@cows-shelter.org", "new-secret")

            assert admin.role == "admin"
            assert admin.is_admin
            assert PasswordManager.verify("new-secret", admin.password_hash)

    async def test_create_new(self, session_factory):
        async with session_factory() as session:
            admin = await AuthService(session).create_admin("boss@cows-shelter.org", "secret123")

        assert admin.id > 0
        assert admin.role == "admin"
