"""Reusable FastAPI dependencies."""

from .database import get_db_session
from .services import (
    get_agent_service,
    get_report_service,
    get_transaction_service,
    get_user_service,
)

__all__ = [
    "get_agent_service",
    "get_db_session",
    "get_report_service",
    "get_transaction_service",
    "get_user_service",
]
