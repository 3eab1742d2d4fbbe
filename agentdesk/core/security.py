"""JWT helpers and authentication dependencies."""
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from sqlalchemy.ext.asyncio import AsyncSession

from agentdesk.core.config import get_settings
from agentdesk.interfaces.http.deps.database import get_db_session
from agentdesk.modules.users import SessionNotFoundError, User, UserService
from agentdesk.schemas import TokenData

SESSION_COOKIE = "session_token"

security = HTTPBearer()


def create_access_token(user_id: str, email: str, expires_delta: Optional[timedelta] = None) -> str:
    settings = get_settings()
    expire_delta = expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    payload = {
        "sub": user_id,
        "email": email,
        "exp": datetime.now(timezone.utc) + expire_delta,
    }
    return jwt.encode(payload, settings.secret_key, algorithm=settings.algorithm)


def decode_access_token(token: str) -> TokenData:
    settings = get_settings()
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except JWTError as exc:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Could not validate credentials") from exc

    user_id = payload.get("sub")
    email = payload.get("email")
    if not user_id or not email:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Could not validate credentials")
    return TokenData(user_id=user_id, email=email)


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    db: AsyncSession = Depends(get_db_session),
) -> User:
    token_data = decode_access_token(credentials.credentials)
    service = UserService.with_session(db)
    user = await service.get_by_id(token_data.user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="User no longer exists")
    return user


async def get_page_user(request: Request, db: AsyncSession = Depends(get_db_session)) -> Optional[User]:
    """Resolve the browser session cookie; ``None`` when it is missing or expired."""
    token = request.cookies.get(SESSION_COOKIE)
    if not token:
        return None
    try:
        return await UserService.with_session(db).validate_session(token)
    except SessionNotFoundError:
        return None
