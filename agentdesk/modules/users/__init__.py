"""User domain services and models."""

from .exceptions import (
    InvalidCredentialsError,
    SessionNotFoundError,
    UserAlreadyExistsError,
    UserError,
    UserNotFoundError,
)
from .models import LoginSession, User, UserCreateInput
from .service import UserService

__all__ = [
    "InvalidCredentialsError",
    "LoginSession",
    "SessionNotFoundError",
    "User",
    "UserAlreadyExistsError",
    "UserCreateInput",
    "UserError",
    "UserNotFoundError",
    "UserService",
]
