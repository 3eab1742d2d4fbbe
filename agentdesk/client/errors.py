"""Exceptions raised by the agentdesk API client."""

from __future__ import annotations


class AgentDeskAPIError(Exception):
    """Base exception for every failed API call."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"[{status_code}] {message}")


class ValidationFailedError(AgentDeskAPIError):
    """The request was rejected before reaching the store (400)."""


class AuthenticationError(AgentDeskAPIError):
    """Missing, invalid or expired credentials (401/403)."""


class NotFoundError(AgentDeskAPIError):
    """The referenced record does not exist (404)."""


class ConflictError(AgentDeskAPIError):
    """The record already exists (409)."""


class ServiceUnavailableError(AgentDeskAPIError):
    """Store or transport failure; the operation did not complete and may be retried."""


_BY_STATUS: dict[int, type[AgentDeskAPIError]] = {
    400: ValidationFailedError,
    401: AuthenticationError,
    403: AuthenticationError,
    404: NotFoundError,
    409: ConflictError,
    422: ValidationFailedError,
}


def error_for_status(status_code: int, message: str) -> AgentDeskAPIError:
    if status_code >= 500:
        return ServiceUnavailableError(status_code, message)
    return _BY_STATUS.get(status_code, AgentDeskAPIError)(status_code, message)


__all__ = [
    "AgentDeskAPIError",
    "AuthenticationError",
    "ConflictError",
    "NotFoundError",
    "ServiceUnavailableError",
    "ValidationFailedError",
    "error_for_status",
]
