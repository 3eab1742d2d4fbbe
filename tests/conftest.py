"""Pytest configuration and fixtures."""

from collections.abc import AsyncIterator
from datetime import datetime, timezone

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from agentdesk.core.security import create_access_token
from agentdesk.infrastructure.database import init_db
from agentdesk.interfaces.http.deps import get_db_session
from agentdesk.main import create_app
from agentdesk.modules.agents import AgentCreateInput, AgentService, Region
from agentdesk.modules.transactions import TransactionInput, TransactionService
from agentdesk.modules.users import UserCreateInput, UserService

TEST_PASSWORD = "Secret!pass1"


@pytest_asyncio.fixture
async def engine() -> AsyncIterator[AsyncEngine]:
    """In-memory SQLite shared by every session of one test."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory) -> AsyncIterator[AsyncSession]:
    async with session_factory() as session:
        yield session
        await session.commit()


@pytest.fixture
def app(session_factory):
    app = create_app()

    async def override_get_db_session() -> AsyncIterator[AsyncSession]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_get_db_session
    return app


@pytest_asyncio.fixture
async def client(app) -> AsyncIterator[AsyncClient]:
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as http:
        yield http


@pytest_asyncio.fixture
async def user(session_factory):
    async with session_factory() as session:
        created = await UserService.with_session(session).register(
            UserCreateInput(
                first_name="Test",
                last_name="User",
                email="tester@example.com",
                password=TEST_PASSWORD,
            )
        )
        await session.commit()
    return created


@pytest.fixture
def auth_headers(user) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(user.id, user.email)}"}


@pytest.fixture
def seed(session_factory):
    """Agents A, B, C with in-range totals 300, 1200 and 4000."""

    async def _seed(transactions: list[tuple[str, float, datetime]] | None = None):
        async with session_factory() as session:
            agents = AgentService.with_session(session)
            created = {}
            for name, region, fee in (("a", Region.NORTH, 500), ("b", Region.SOUTH, 1500), ("c", Region.EAST, 2500)):
                created[name] = await agents.create_agent(
                    AgentCreateInput(first_name=name, last_name="agent", region=region, rating=50, fee=fee)
                )
            service = TransactionService.with_session(session)
            rows = transactions if transactions is not None else [
                ("a", 300, datetime(2024, 1, 5, 12, tzinfo=timezone.utc)),
                ("b", 700, datetime(2024, 1, 6, 9, tzinfo=timezone.utc)),
                ("b", 500, datetime(2024, 1, 7, 18, tzinfo=timezone.utc)),
                ("c", 4000, datetime(2024, 1, 8, 23, 30, tzinfo=timezone.utc)),
            ]
            for name, amount, when in rows:
                await service.create_transaction(
                    TransactionInput(amount=amount, agent_id=created[name].id, date=when)
                )
            await session.commit()
            return created

    return _seed
