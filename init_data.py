"""
Seed the database with a default user and demo agents/transactions.
Safe to run repeatedly: existing rows are left untouched.
"""
import asyncio
from datetime import timedelta

from agentdesk.infrastructure.database import get_session, init_db
from agentdesk.modules.agents import AgentCreateInput, AgentService, Region
from agentdesk.modules.common import utcnow
from agentdesk.modules.transactions import TransactionInput, TransactionService
from agentdesk.modules.users import UserAlreadyExistsError, UserCreateInput, UserService

DEFAULT_EMAIL = "admin@example.com"
DEFAULT_PASSWORD = "Admin@123"

DEMO_AGENTS = [
    ("alice", "johnson", Region.NORTH, 88, 500),
    ("bob", "smith", Region.SOUTH, 72, 1500),
    ("carla", "diaz", Region.EAST, 95, 2500),
    ("dan", "okafor", Region.WEST, 64, 800),
]


async def create_default_user(db) -> None:
    service = UserService.with_session(db)
    try:
        await service.register(
            UserCreateInput(
                first_name="Admin",
                last_name="User",
                email=DEFAULT_EMAIL,
                password=DEFAULT_PASSWORD,
            )
        )
    except UserAlreadyExistsError:
        print("Default user already exists, skipping")
        return

    print("=" * 50)
    print("Default user created")
    print(f"Email:    {DEFAULT_EMAIL}")
    print(f"Password: {DEFAULT_PASSWORD}")
    print("Change this password after the first login!")
    print("=" * 50)


async def create_demo_data(db) -> None:
    agents = AgentService.with_session(db)
    if await agents.list_agents():
        print("Agents already present, skipping demo data")
        return

    transactions = TransactionService.with_session(db)
    now = utcnow()
    for index, (first, last, region, rating, fee) in enumerate(DEMO_AGENTS):
        agent = await agents.create_agent(
            AgentCreateInput(first_name=first, last_name=last, region=region, rating=rating, fee=fee)
        )
        for day in range(0, 20, 3):
            await transactions.create_transaction(
                TransactionInput(
                    amount=100 * (index + 1) + 10 * day,
                    agent_id=agent.id,
                    date=now - timedelta(days=day + index),
                )
            )
    print(f"Created {len(DEMO_AGENTS)} demo agents with transactions")


async def main() -> None:
    await init_db()
    async for db in get_session():
        await create_default_user(db)
        await create_demo_data(db)


if __name__ == "__main__":
    asyncio.run(main())
