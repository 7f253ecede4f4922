"""End-to-end tests for registration, login and the current user."""

import pytest

from tests.harness import create_app_fixture

# E2E test fixture - app over mocked infrastructure
e2e_env = create_app_fixture()


class TestAuthFlow:
    @pytest.mark.asyncio
    async def test_register_login_and_me(self, e2e_env):
        """Should register a pending user who can log in and read /users/me."""
        client = e2e_env.client

        # Act
        registered = await client.post(
            "/auth/register",
            json={"username": "ada", "email": "ada@example.com", "password": "secret1"},
        )
        login = await client.post(
            "/auth/login", json={"email": "ada@example.com", "password": "secret1"}
        )

        # Assert
        assert registered.status_code == 201
        assert "token" in registered.json()
        assert login.status_code == 200

        me = await client.get(
            "/users/me", headers={"Authorization": f"Bearer {login.json()['token']}"}
        )
        assert me.status_code == 200
        body = me.json()
        assert body["role"] == "user"
        assert body["membership_status"] == "pending"
        assert "password_hash" not in body

    @pytest.mark.asyncio
    async def test_duplicate_email_conflicts(self, e2e_env):
        payload = {"username": "ada", "email": "ada@example.com", "password": "secret1"}
        await e2e_env.client.post("/auth/register", json=payload)

        response = await e2e_env.client.post("/auth/register", json=payload)

        assert response.status_code == 409
        assert response.json()["detail"] == "Email already registered"

    @pytest.mark.asyncio
    async def test_invalid_email_is_400_with_field_errors(self, e2e_env):
        response = await e2e_env.client.post(
            "/auth/register",
            json={"username": "ada", "email": "nope", "password": "secret1"},
        )

        assert response.status_code == 400
        body = response.json()
        assert body["detail"] == "Validation failed"
        assert body["errors"][0]["field"] == "email"

    @pytest.mark.asyncio
    async def test_wrong_password_is_401(self, e2e_env):
        await e2e_env.client.post(
            "/auth/register",
            json={"username": "ada", "email": "ada@example.com", "password": "secret1"},
        )

        response = await e2e_env.client.post(
            "/auth/login", json={"email": "ada@example.com", "password": "wrong!"}
        )

        assert response.status_code == 401
        assert response.json()["code"] == "Unauthenticated"

    @pytest.mark.asyncio
    async def test_protected_route_without_token(self, e2e_env):
        response = await e2e_env.client.get("/users/me")

        assert response.status_code == 401
        assert response.headers["www-authenticate"] == "Bearer"


@pytest.mark.asyncio
async def test_health(e2e_env):
    response = await e2e_env.client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
