"""Domain models for users and login sessions."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Optional


@dataclass(slots=True)
class User:
    id: str
    first_name: str
    last_name: str
    email: str
    password_hash: str = field(repr=False)
    created_at: Optional[datetime] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


@dataclass(slots=True)
class UserCreateInput:
    first_name: str
    last_name: str
    email: str
    password: str


@dataclass(slots=True)
class LoginSession:
    session_token: str
    user_id: str
    created_at: datetime

    def expires_at(self, ttl: timedelta) -> datetime:
        return self.created_at + ttl
