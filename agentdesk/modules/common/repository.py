"""Repository base shared by the SQLAlchemy repositories."""

from __future__ import annotations

from typing import Any, ClassVar, Generic, Sequence, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

ModelT = TypeVar("ModelT")


class AsyncRepository(Generic[ModelT]):
    """Base repository exposing the SQLAlchemy session and primary-key helpers."""

    model: ClassVar[type[Any]]

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    @property
    def session(self) -> AsyncSession:
        return self._session

    async def add(self, instance: ModelT) -> ModelT:
        self.session.add(instance)
        await self.session.flush()
        await self.session.refresh(instance)
        return instance

    async def get(self, identity: str) -> ModelT | None:
        return await self.session.get(self.model, identity)

    async def list_all(self, *order_by: Any) -> Sequence[ModelT]:
        stmt = select(self.model)
        if order_by:
            stmt = stmt.order_by(*order_by)
        result = await self.session.execute(stmt)
        return result.scalars().all()

    async def remove(self, instance: ModelT) -> None:
        await self.session.delete(instance)
        await self.session.flush()
