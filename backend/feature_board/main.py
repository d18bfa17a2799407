"""
Feature Request Board backend.

Serves feature requests, votes, comments, users and the board branding
document from MongoDB. Every request passes through IdentityMiddleware,
which attaches the caller's verified email (or None) for the admin routes.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from pymongo.errors import PyMongoError

from .api.admin import router as admin_router
from .api.comments import router as comments_router
from .api.dependencies.identity_middleware import IdentityMiddleware
from .api.health import router as health_router
from .api.requests import router as requests_router
from .api.users import router as users_router
from .core.config import get_settings
from .core.exceptions import BoardError
from .database.mongodb import COMMENTS, FEATURE_REQUESTS, USERS, MongoDB
from .database.repositories.comment_repository import CommentRepository
from .database.repositories.feature_request_repository import (
    FeatureRequestRepository,
)
from .database.repositories.user_repository import UserRepository
from .services.identity_service import IdentityVerifier

logging.basicConfig(level=logging.INFO)

logger = structlog.get_logger()


async def ensure_indexes(mongodb: MongoDB) -> None:
    """Create the indexes the board queries rely on (idempotent)."""
    await UserRepository(mongodb.get_collection(USERS)).ensure_indexes()
    await FeatureRequestRepository(
        mongodb.get_collection(FEATURE_REQUESTS)
    ).ensure_indexes()
    await CommentRepository(mongodb.get_collection(COMMENTS)).ensure_indexes()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Connect once at startup; disconnect and release the key fetcher on exit."""
    settings = get_settings()
    mongodb = MongoDB()

    logger.info(
        "Starting Feature Request Board",
        environment=settings.environment,
        port=settings.port,
    )

    try:
        await mongodb.connect(settings.mongodb_url)
        await ensure_indexes(mongodb)
        app.state.mongodb = mongodb
        logger.info("Database connection started")

        yield

    finally:
        await mongodb.disconnect()
        await app.state.identity_verifier.close()
        logger.info("Database connection stopped")


def jsonable_errors(exc: RequestValidationError) -> list[dict]:
    """Reduce validation errors to their location, message and type."""
    return [
        {
            "loc": list(error.get("loc", ())),
            "msg": error.get("msg"),
            "type": error.get("type"),
        }
        for error in exc.errors()
    ]


def register_exception_handlers(app: FastAPI) -> None:
    """Install the JSON error responses shared by every router."""

    @app.exception_handler(BoardError)
    async def board_error_handler(request: Request, exc: BoardError) -> JSONResponse:
        log_method = logger.error if exc.status_code >= 500 else logger.warning
        log_method(
            "Request failed",
            path=request.url.path,
            method=request.method,
            **exc.to_dict(),
        )
        return JSONResponse(status_code=exc.status_code, content=exc.to_response())

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        # FastAPI answers 422 by default; board clients expect 400
        errors = jsonable_errors(exc)
        logger.warning(
            "Request body or parameters rejected",
            path=request.url.path,
            method=request.method,
            errors=errors,
        )
        return JSONResponse(
            status_code=400,
            content={"detail": errors, "error_type": "validation_error"},
        )

    @app.exception_handler(PyMongoError)
    async def database_error_handler(
        request: Request, exc: PyMongoError
    ) -> JSONResponse:
        logger.error(
            "Database operation failed",
            path=request.url.path,
            method=request.method,
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return JSONResponse(
            status_code=500,
            content={
                "detail": "Database operation failed",
                "error_type": "database_error",
            },
        )


def create_app(verifier: IdentityVerifier | None = None) -> FastAPI:
    """
    Build the board application.

    Args:
        verifier: Bearer token verifier (defaults to one built from settings)
    """
    settings = get_settings()

    app = FastAPI(
        title="Feature Request Board API",
        description="Feature requests, votes, comments and board administration",
        version="0.1.0",
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
        lifespan=lifespan,
    )

    app.state.identity_verifier = verifier or IdentityVerifier(settings)

    # Added last runs first: CORS wraps identity
    app.add_middleware(IdentityMiddleware, verifier=app.state.identity_verifier)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(health_router, prefix="/api", tags=["health"])
    app.include_router(requests_router)
    app.include_router(comments_router)
    app.include_router(users_router)
    app.include_router(admin_router)

    @app.get("/", response_class=PlainTextResponse)
    async def root() -> str:
        return "Server is running fine"

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "feature_board.main:app",
        host="0.0.0.0",  # nosec B104 - Required for Docker container
        port=settings.port,
        reload=settings.is_development,
        log_config=None,  # Use structlog configuration
    )
