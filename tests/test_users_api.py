"""Tests for registration, login and session validation."""

from datetime import timedelta

import pytest

from agentdesk.modules.common import utcnow
from agentdesk.modules.users import SessionNotFoundError, UserService

pytestmark = pytest.mark.asyncio

REGISTRATION = {
    "first_name": "Ada",
    "last_name": "Lovelace",
    "email": "Ada@Example.com",
    "password": "analytical!1",
}


class TestRegister:
    """POST /api/users/register."""

    async def test_register(self, client) -> None:
        """A new user is created with a normalized email."""
        response = await client.post("/api/users/register", json=REGISTRATION)
        assert response.status_code == 201
        data = response.json()["data"]
        assert data["email"] == "ada@example.com"
        assert "password" not in data
        assert "passwordHash" not in data

    async def test_duplicate_email(self, client) -> None:
        """Registering the same email twice is a conflict."""
        await client.post("/api/users/register", json=REGISTRATION)
        response = await client.post("/api/users/register", json={**REGISTRATION, "email": "ada@example.com"})
        assert response.status_code == 409

    @pytest.mark.parametrize("password", ["short!1", "longenoughbutplain"])
    async def test_password_policy(self, client, password) -> None:
        """Passwords need eight characters and a special character."""
        response = await client.post("/api/users/register", json={**REGISTRATION, "password": password})
        assert response.status_code == 400
        assert response.json()["status"] == "error"

    async def test_missing_fields(self, client) -> None:
        """Every registration field is required."""
        response = await client.post("/api/users/register", json={"email": "x@example.com"})
        assert response.status_code == 400


class TestLogin:
    """Login, token validation and logout."""

    async def test_login_and_validate(self, client, user) -> None:
        """Login returns a bearer token and a session token that validates."""
        response = await client.post(
            "/api/users/login", json={"email": user.email, "password": "Secret!pass1"}
        )
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["token"]
        assert data["tokenType"] == "bearer"
        assert response.cookies.get("session_token") == data["sessionToken"]

        response = await client.get("/api/users/validate_token", params={"token": data["sessionToken"]})
        assert response.status_code == 200
        assert response.json()["data"]["valid"] is True
        assert response.json()["data"]["user"]["email"] == user.email

        response = await client.get("/api/agents", headers={"Authorization": f"Bearer {data['token']}"})
        assert response.status_code == 200

    async def test_unknown_email(self, client) -> None:
        """Unknown emails are 404."""
        response = await client.post(
            "/api/users/login", json={"email": "nobody@example.com", "password": "whatever!1"}
        )
        assert response.status_code == 404

    async def test_wrong_password(self, client, user) -> None:
        """A wrong password is 401."""
        response = await client.post("/api/users/login", json={"email": user.email, "password": "wrong!pass"})
        assert response.status_code == 401
        assert response.json()["message"] == "Invalid password"

    async def test_unknown_session_token(self, client) -> None:
        """Unknown session tokens do not validate."""
        response = await client.get("/api/users/validate_token", params={"token": "nope"})
        assert response.status_code == 404

    async def test_logout(self, client, user) -> None:
        """After logout the session token is no longer valid."""
        login = (
            await client.post("/api/users/login", json={"email": user.email, "password": "Secret!pass1"})
        ).json()["data"]
        response = await client.post("/api/users/logout", json={"sessionToken": login["sessionToken"]})
        assert response.status_code == 200

        response = await client.get("/api/users/validate_token", params={"token": login["sessionToken"]})
        assert response.status_code == 404

    async def test_invalid_bearer_token(self, client) -> None:
        """A forged bearer token is 401."""
        response = await client.get("/api/agents", headers={"Authorization": "Bearer not-a-jwt"})
        assert response.status_code == 401


class TestSessionExpiry:
    """Sessions expire after the configured lifetime."""

    async def test_expired_session(self, db_session, user) -> None:
        """A session older than its lifetime no longer validates."""
        service = UserService.with_session(db_session)
        session = await service.open_session(user)
        assert (await service.validate_session(session.session_token)).id == user.id

        short_lived = UserService(service._repository, session_ttl=timedelta(seconds=0))
        with pytest.raises(SessionNotFoundError):
            await short_lived.validate_session(session.session_token)

    async def test_expired_sessions_are_purged(self, db_session, user) -> None:
        """Opening a session removes expired ones."""
        service = UserService.with_session(db_session)
        repository = service._repository
        await repository.create_session(
            user_id=user.id,
            session_token="stale-token",
            created_at=utcnow() - timedelta(days=3),
        )
        await service.open_session(user)
        assert await repository.get_session("stale-token") is None
