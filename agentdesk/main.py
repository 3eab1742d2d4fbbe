import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from agentdesk import __version__
from agentdesk.api import create_api_router
from agentdesk.core.config import get_settings
from agentdesk.core.logging import setup_logging
from agentdesk.infrastructure.database import dispose_engine, init_db
from agentdesk.interfaces.http.routers import pages
from agentdesk.interfaces.http.templating import STATIC_DIR
from agentdesk.schemas import ApiEnvelope, HealthResponse

logger = logging.getLogger(__name__)

settings = get_settings()


def _error(status_code: int, message: str, headers: dict | None = None) -> JSONResponse:
    body = ApiEnvelope(status="error", message=message).model_dump()
    return JSONResponse(status_code=status_code, content=body, headers=headers)


def _validation_message(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ()) if item != "body")
        parts.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    return "; ".join(parts) or "Invalid request"


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return _error(exc.status_code, str(exc.detail), getattr(exc, "headers", None))


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return _error(status.HTTP_400_BAD_REQUEST, _validation_message(exc))


async def database_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception("Database failure on %s %s", request.method, request.url.path)
    return _error(status.HTTP_503_SERVICE_UNAVAILABLE, "Service temporarily unavailable, please retry")


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.logging.level, settings.logging.format)
    await init_db()
    logger.info("%s %s started", settings.project_name, __version__)
    yield
    await dispose_engine()


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.project_name,
        description="Agent and transaction management with reporting",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, database_exception_handler)

    if STATIC_DIR.exists():
        app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

    app.include_router(create_api_router(settings.api_prefix))
    app.include_router(pages.router)

    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health() -> HealthResponse:
        return HealthResponse(version=__version__)

    return app


app = create_app()
