"""Async API client and view controllers for agentdesk."""

from .api import AgentDeskClient
from .controllers import ListingTable, ReportDashboard
from .errors import (
    AgentDeskAPIError,
    AuthenticationError,
    ConflictError,
    NotFoundError,
    ServiceUnavailableError,
    ValidationFailedError,
)

__all__ = [
    "AgentDeskAPIError",
    "AgentDeskClient",
    "AuthenticationError",
    "ConflictError",
    "ListingTable",
    "NotFoundError",
    "ReportDashboard",
    "ServiceUnavailableError",
    "ValidationFailedError",
]
