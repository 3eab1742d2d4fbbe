"""Registration, login and session endpoints."""

from typing import Optional

from fastapi import APIRouter, Cookie, Depends, HTTPException, Query, Response, status

from agentdesk.core.config import get_settings
from agentdesk.core.security import SESSION_COOKIE, create_access_token
from agentdesk.interfaces.http.deps import get_user_service
from agentdesk.interfaces.http.presenters import user_to_schema
from agentdesk.modules.users import (
    InvalidCredentialsError,
    SessionNotFoundError,
    UserAlreadyExistsError,
    UserCreateInput,
    UserNotFoundError,
    UserService,
)
from agentdesk.schemas import (
    ApiEnvelope,
    LoginRequest,
    LoginResponse,
    LogoutRequest,
    TokenValidation,
    UserRegister,
    UserResponse,
)

router = APIRouter()


@router.post(
    "/register",
    response_model=ApiEnvelope[UserResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Register a user",
)
async def register(payload: UserRegister, service: UserService = Depends(get_user_service)):
    try:
        user = await service.register(
            UserCreateInput(
                first_name=payload.first_name,
                last_name=payload.last_name,
                email=payload.email,
                password=payload.password,
            )
        )
    except UserAlreadyExistsError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="User already exists") from exc
    return ApiEnvelope(data=user_to_schema(user), message="User registered successfully")


@router.post("/login", response_model=ApiEnvelope[LoginResponse], summary="Log in with email and password")
async def login(
    payload: LoginRequest,
    response: Response,
    service: UserService = Depends(get_user_service),
):
    try:
        user = await service.authenticate(payload.email, payload.password)
    except UserNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found") from exc
    except InvalidCredentialsError as exc:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid password") from exc

    session = await service.open_session(user)
    response.set_cookie(
        SESSION_COOKIE,
        session.session_token,
        max_age=get_settings().security.session_ttl_hours * 3600,
        httponly=True,
        samesite="lax",
    )
    return ApiEnvelope(
        data=LoginResponse(
            token=create_access_token(user.id, user.email),
            session_token=session.session_token,
            user=user_to_schema(user),
        )
    )


@router.get("/validate_token", response_model=ApiEnvelope[TokenValidation], summary="Validate a session token")
async def validate_token(
    token: str = Query(..., min_length=1),
    service: UserService = Depends(get_user_service),
):
    try:
        user = await service.validate_session(token)
    except SessionNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Session not found") from exc
    return ApiEnvelope(data=TokenValidation(valid=True, user=user_to_schema(user)))


@router.post("/logout", response_model=ApiEnvelope[None], summary="End a session")
async def logout(
    response: Response,
    payload: Optional[LogoutRequest] = None,
    session_cookie: Optional[str] = Cookie(default=None, alias=SESSION_COOKIE),
    service: UserService = Depends(get_user_service),
):
    token = payload.session_token if payload else session_cookie
    if not token:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="sessionToken is required")
    try:
        await service.close_session(token)
    except SessionNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Session not found") from exc
    response.delete_cookie(SESSION_COOKIE)
    return ApiEnvelope(message="Logged out")
