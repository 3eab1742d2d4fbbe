from fastapi import APIRouter

from agentdesk.interfaces.http.routers import agents, reports, transactions, users, views


def create_api_router(prefix: str = "") -> APIRouter:
    router = APIRouter(prefix=prefix)
    router.include_router(users.router, prefix="/users", tags=["users"])
    router.include_router(agents.router, prefix="/agents", tags=["agents"])
    router.include_router(transactions.router, prefix="/transactions", tags=["transactions"])
    router.include_router(reports.router, prefix="/reports", tags=["reports"])
    router.include_router(views.router, prefix="/views", tags=["views"])
    return router


__all__ = [
    "create_api_router",
]
