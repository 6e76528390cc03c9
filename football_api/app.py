"""Main FastAPI application."""
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Callable, Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import ORJSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from football_api import __version__
from football_api.app_logging import get_logger, setup_logging
from football_api.config import Settings, get_settings
from football_api.errors import ErrorKind, ServiceError
from football_api.middleware import RequestLoggingMiddleware
from football_api.routes import games, health, player_stats, players, teams
from football_api.storage.base import utcnow
from football_api.storage.db import Database

logger = get_logger(__name__)

STATUS_BY_KIND = {
    ErrorKind.INVALID_ARGUMENT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NO_FIELDS_PROVIDED: status.HTTP_400_BAD_REQUEST,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _request_id(request: Request) -> Optional[str]:
    return getattr(request.state, "request_id", None)


async def service_error_handler(request: Request, exc: ServiceError):
    status_code = STATUS_BY_KIND.get(exc.kind, status.HTTP_500_INTERNAL_SERVER_ERROR)
    if status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}", extra={"request_id": _request_id(request)})
    else:
        logger.info(
            f"{request.method} {request.url.path} rejected: {exc.message}",
            extra={"request_id": _request_id(request), "error_type": exc.kind.value, "field": exc.field},
        )
    return ORJSONResponse(status_code=status_code, content={"error": exc.to_dict()})


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return ORJSONResponse(
        status_code=exc.status_code,
        content={"error": {"message": exc.detail, "type": "http_error"}},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return ORJSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error": {
                "message": "Validation error",
                "type": "validation_error",
                "details": jsonable_encoder(exc.errors()),
            }
        },
    )


async def database_exception_handler(request: Request, exc: SQLAlchemyError):
    logger.exception(f"Database error on {request.method} {request.url.path}", extra={"request_id": _request_id(request)})
    return ORJSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": {"message": "internal storage error", "type": ErrorKind.INTERNAL.value}},
    )


def create_app(
    settings: Optional[Settings] = None,
    database: Optional[Database] = None,
    clock: Callable[[], datetime] = utcnow,
) -> FastAPI:
    """Build the application.

    ``database`` and ``clock`` can be injected; otherwise the database is built
    from ``settings`` and owned (and disposed) by the app.
    """
    settings = settings or get_settings()
    setup_logging(settings.LOG_LEVEL)

    owns_database = database is None
    if database is None:
        database = Database(
            settings.DATABASE_URL,
            echo=settings.DATABASE_ECHO,
            pool_size=settings.DATABASE_POOL_SIZE,
            max_overflow=settings.DATABASE_MAX_OVERFLOW,
        )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Starting Football Stats API - Environment: {settings.ENVIRONMENT}")
        database.init_db()
        yield
        logger.info("Shutting down Football Stats API")
        if owns_database:
            database.dispose()

    app = FastAPI(
        title="Football Stats API",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        default_response_class=ORJSONResponse,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = database
    app.state.clock = clock

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )
    app.add_middleware(RequestLoggingMiddleware)

    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, database_exception_handler)

    app.include_router(health.liveness_router, tags=["health"])
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(teams.router, prefix="/api/teams", tags=["teams"])
    app.include_router(players.router, prefix="/api/players", tags=["players"])
    app.include_router(games.router, prefix="/api/games", tags=["games"])
    app.include_router(player_stats.router, prefix="/api/player-stats", tags=["player-stats"])

    @app.get("/")
    async def root():
        return {"message": "Football Stats API", "documentation": "/docs"}

    return app

