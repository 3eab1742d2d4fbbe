"""Repository protocol for users and sessions."""

from __future__ import annotations

from datetime import datetime
from typing import Protocol

from .models import LoginSession, User


class UserRepository(Protocol):
    """Abstract repository interface for user and session persistence."""

    async def get_by_id(self, user_id: str) -> User | None:
        ...

    async def get_by_email(self, email: str) -> User | None:
        ...

    async def create_user(
        self,
        *,
        first_name: str,
        last_name: str,
        email: str,
        password_hash: str,
    ) -> User:
        ...

    async def create_session(
        self, *, user_id: str, session_token: str, created_at: datetime
    ) -> LoginSession:
        ...

    async def get_session(self, session_token: str) -> tuple[LoginSession, User] | None:
        ...

    async def delete_session(self, session_token: str) -> bool:
        ...

    async def purge_sessions(self, created_before: datetime) -> int:
        ...
