"""Domain service providers bound to the request session."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from agentdesk.modules.agents import AgentService
from agentdesk.modules.reports import ReportService
from agentdesk.modules.transactions import TransactionService
from agentdesk.modules.users import UserService

from .database import get_db_session


def get_user_service(db: AsyncSession = Depends(get_db_session)) -> UserService:
    return UserService.with_session(db)


def get_agent_service(db: AsyncSession = Depends(get_db_session)) -> AgentService:
    return AgentService.with_session(db)


def get_transaction_service(db: AsyncSession = Depends(get_db_session)) -> TransactionService:
    return TransactionService.with_session(db)


def get_report_service(db: AsyncSession = Depends(get_db_session)) -> ReportService:
    return ReportService.with_session(db)


__all__ = [
    "get_agent_service",
    "get_report_service",
    "get_transaction_service",
    "get_user_service",
]
