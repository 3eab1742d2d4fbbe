"""SQLAlchemy implementation of the user repository."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import delete, select

from agentdesk.db.models import Session as SessionModel
from agentdesk.db.models import User as UserModel
from agentdesk.modules.common import AsyncRepository
from agentdesk.modules.users.models import LoginSession, User


class SqlUserRepository(AsyncRepository[UserModel]):
    """User and session repository backed by SQLAlchemy models."""

    model = UserModel

    async def get_by_id(self, user_id: str) -> User | None:
        return self._to_domain(await self.get(user_id))

    async def get_by_email(self, email: str) -> User | None:
        stmt = select(UserModel).where(UserModel.email == email)
        result = await self.session.execute(stmt)
        return self._to_domain(result.scalar_one_or_none())

    async def create_user(
        self,
        *,
        first_name: str,
        last_name: str,
        email: str,
        password_hash: str,
    ) -> User:
        model = await self.add(
            UserModel(
                first_name=first_name,
                last_name=last_name,
                email=email,
                password_hash=password_hash,
            )
        )
        return self._to_domain(model)

    async def create_session(
        self, *, user_id: str, session_token: str, created_at: datetime
    ) -> LoginSession:
        model = SessionModel(user_id=user_id, session_token=session_token, created_at=created_at)
        self.session.add(model)
        await self.session.flush()
        return LoginSession(session_token=session_token, user_id=user_id, created_at=created_at)

    async def get_session(self, session_token: str) -> tuple[LoginSession, User] | None:
        stmt = (
            select(SessionModel, UserModel)
            .join(UserModel, SessionModel.user_id == UserModel.id)
            .where(SessionModel.session_token == session_token)
        )
        row = (await self.session.execute(stmt)).first()
        if row is None:
            return None
        session_model, user_model = row
        login_session = LoginSession(
            session_token=session_model.session_token,
            user_id=session_model.user_id,
            created_at=session_model.created_at,
        )
        return login_session, self._to_domain(user_model)

    async def delete_session(self, session_token: str) -> bool:
        stmt = delete(SessionModel).where(SessionModel.session_token == session_token)
        result = await self.session.execute(stmt)
        return bool(result.rowcount)

    async def purge_sessions(self, created_before: datetime) -> int:
        stmt = delete(SessionModel).where(SessionModel.created_at < created_before)
        result = await self.session.execute(stmt)
        return int(result.rowcount or 0)

    @staticmethod
    def _to_domain(model: UserModel | None) -> User | None:
        if model is None:
            return None
        return User(
            id=str(model.id),
            first_name=model.first_name,
            last_name=model.last_name,
            email=model.email,
            password_hash=model.password_hash,
            created_at=model.created_at,
        )
