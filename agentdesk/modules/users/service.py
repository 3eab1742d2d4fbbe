"""Domain services for registration, login and session validation."""

from __future__ import annotations

import logging
import uuid
from datetime import timedelta

from sqlalchemy.ext.asyncio import AsyncSession

from agentdesk.core.config import get_settings
from agentdesk.core.crypto import hash_password, verify_password
from agentdesk.modules.common import as_utc, utcnow

from .exceptions import (
    InvalidCredentialsError,
    SessionNotFoundError,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from .models import LoginSession, User, UserCreateInput
from .repository import UserRepository

logger = logging.getLogger(__name__)


class UserService:
    """Encapsulates user registration and session use cases."""

    def __init__(self, repository: UserRepository, *, session_ttl: timedelta) -> None:
        self._repository = repository
        self._session_ttl = session_ttl

    @classmethod
    def with_session(cls, session: AsyncSession) -> "UserService":
        # Deferred import: the repository module imports this package's models
        from agentdesk.infrastructure.database.repositories.user_repository import SqlUserRepository

        ttl = timedelta(hours=get_settings().security.session_ttl_hours)
        return cls(SqlUserRepository(session), session_ttl=ttl)

    async def get_by_id(self, user_id: str) -> User | None:
        return await self._repository.get_by_id(user_id)

    async def register(self, payload: UserCreateInput) -> User:
        email = _normalize_email(payload.email)
        existing = await self._repository.get_by_email(email)
        if existing is not None:
            raise UserAlreadyExistsError(f"User already exists: {email}")

        user = await self._repository.create_user(
            first_name=payload.first_name.strip(),
            last_name=payload.last_name.strip(),
            email=email,
            password_hash=hash_password(payload.password),
        )
        logger.info("Registered user %s", user.id)
        return user

    async def authenticate(self, email: str, password: str) -> User:
        user = await self._repository.get_by_email(_normalize_email(email))
        if user is None:
            raise UserNotFoundError(email)
        if not verify_password(password, user.password_hash):
            logger.warning("Invalid password for user %s", user.id)
            raise InvalidCredentialsError(email)
        return user

    async def open_session(self, user: User) -> LoginSession:
        now = utcnow()
        purged = await self._repository.purge_sessions(now - self._session_ttl)
        if purged:
            logger.debug("Purged %d expired sessions", purged)
        session = await self._repository.create_session(
            user_id=user.id,
            session_token=str(uuid.uuid4()),
            created_at=now,
        )
        logger.info("Opened session for user %s", user.id)
        return session

    async def validate_session(self, session_token: str) -> User:
        found = await self._repository.get_session(session_token)
        if found is None:
            raise SessionNotFoundError(session_token)
        session, user = found
        if as_utc(session.expires_at(self._session_ttl)) <= utcnow():
            raise SessionNotFoundError(session_token)
        return user

    async def close_session(self, session_token: str) -> None:
        if not await self._repository.delete_session(session_token):
            raise SessionNotFoundError(session_token)


def _normalize_email(email: str) -> str:
    return email.strip().lower()
